"""Shared GUI state models."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from ..settings.store import ScalarConfig


class ControllerState(enum.IntEnum):
    UNINITIALIZED = 0
    TREE_BUILT = 1
    CONFIG_LOADED = 2
    EFFECTS_LOADED = 3
    READY = 4


class ControllerStateError(RuntimeError):
    pass


def _field_to_int(text: str) -> Optional[int]:
    text = (text or "").strip()
    if not text:
        return None
    return int(text)


@dataclass
class ScalarForm:
    """Text shown in the three numeric entries of the Misc tab.

    An empty string means "use the default" when saving. A negative seed is
    never displayed; the field stays empty and is written back as ``-1``.
    """

    spawn_interval: str = ""
    timed_duration: str = ""
    seed: str = ""

    def apply_config(self, config: ScalarConfig) -> None:
        if config.spawn_interval is not None:
            self.spawn_interval = str(config.spawn_interval)
        if config.timed_duration is not None:
            self.timed_duration = str(config.timed_duration)
        if config.has_seed:
            self.seed = str(config.seed)

    def to_config(self) -> ScalarConfig:
        """Raises ValueError if a field holds something other than an integer."""
        return ScalarConfig(
            spawn_interval=_field_to_int(self.spawn_interval),
            timed_duration=_field_to_int(self.timed_duration),
            seed=_field_to_int(self.seed),
        )


__all__ = ["ControllerState", "ControllerStateError", "ScalarForm"]
