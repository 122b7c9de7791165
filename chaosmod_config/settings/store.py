from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Dict, Iterator, Mapping, Optional, Tuple

from ..effects import EffectRegistry
from .errors import (
    EmptyFileError,
    FileMissingError,
    IncompleteFileError,
    MalformedValueError,
    ParseError,
)
from .files import read_text, write_text_atomic

log = logging.getLogger(__name__)

KEY_SPAWN_INTERVAL = "NewEffectSpawnTime"
KEY_TIMED_DURATION = "EffectTimedDur"
KEY_SEED = "Seed"

DEFAULT_SPAWN_INTERVAL = 60
DEFAULT_TIMED_DURATION = 180
DEFAULT_SEED = -1

REQUIRED_CONFIG_KEYS = (KEY_SEED,)

# Optional sign, ASCII digits, surrounding whitespace allowed (handles CRLF files).
_INT_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$", re.ASCII)

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


def _parse_int(text: str) -> Optional[int]:
    """Signed 32-bit integer, or None. The mod reads both files as int32."""
    if not _INT_RE.match(text):
        return None
    value = int(text)
    if not INT32_MIN <= value <= INT32_MAX:
        return None
    return value


def _iter_pairs(text: str) -> Iterator[Tuple[int, str, str]]:
    """Yield ``(lineno, key, value)`` for every line with exactly one ``=``."""
    for lineno, line in enumerate(text.split("\n"), start=1):
        parts = line.split("=")
        if len(parts) != 2:
            continue
        yield lineno, parts[0], parts[1]


# ---------------------------------------------------------------------------
# config.ini
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScalarConfig:
    """Scalar settings. ``None`` means the form field is empty."""

    spawn_interval: Optional[int] = DEFAULT_SPAWN_INTERVAL
    timed_duration: Optional[int] = DEFAULT_TIMED_DURATION
    seed: Optional[int] = DEFAULT_SEED

    @property
    def has_seed(self) -> bool:
        return self.seed is not None and self.seed >= 0


_CONFIG_FIELDS = {
    KEY_SPAWN_INTERVAL: "spawn_interval",
    KEY_TIMED_DURATION: "timed_duration",
    KEY_SEED: "seed",
}


def parse_config(text: str, base: Optional[ScalarConfig] = None, *, path: Optional[str] = None) -> ScalarConfig:
    """Parse ``config.ini`` content.

    Recognised keys overwrite the matching field of *base* (defaults when
    omitted); unknown keys and lines without exactly one ``=`` are skipped.
    Raises :class:`EmptyFileError`, :class:`MalformedValueError` on the first
    non-integer value, or :class:`IncompleteFileError` if ``Seed`` is absent.
    """
    current = base if base is not None else ScalarConfig()
    if len(text) == 0:
        raise EmptyFileError("config file is empty", path=path, partial=current)

    seen = set()
    for lineno, key, raw in _iter_pairs(text):
        value = _parse_int(raw)
        if value is None:
            raise MalformedValueError("value is not an integer", lineno=lineno, line=f"{key}={raw}", path=path, partial=current)
        attr = _CONFIG_FIELDS.get(key)
        if attr is None:
            continue
        seen.add(key)
        current = replace(current, **{attr: value})

    missing = [k for k in REQUIRED_CONFIG_KEYS if k not in seen]
    if missing:
        raise IncompleteFileError(missing, path=path, partial=current)
    return current


def serialize_config(config: ScalarConfig) -> str:
    def _or(value: Optional[int], default: int) -> int:
        return default if value is None else value

    return (
        f"{KEY_SPAWN_INTERVAL}={_or(config.spawn_interval, DEFAULT_SPAWN_INTERVAL)}\n"
        f"{KEY_TIMED_DURATION}={_or(config.timed_duration, DEFAULT_TIMED_DURATION)}\n"
        f"{KEY_SEED}={_or(config.seed, DEFAULT_SEED)}\n"
    )


# ---------------------------------------------------------------------------
# effects.ini
# ---------------------------------------------------------------------------


def parse_effect_states(text: str, *, path: Optional[str] = None) -> Dict[int, bool]:
    """Parse ``effects.ini`` content into ``{effect_id: enabled}``.

    No completeness check: a file listing only some ids is valid. Ids that the
    registry does not know are returned as well; callers ignore them.
    """
    if len(text) == 0:
        raise EmptyFileError("effects file is empty", path=path, partial={})

    states: Dict[int, bool] = {}
    for lineno, raw_key, raw_value in _iter_pairs(text):
        effect_id = _parse_int(raw_key)
        value = _parse_int(raw_value)
        if effect_id is None or value is None:
            raise MalformedValueError(
                "id and flag must be integers", lineno=lineno, line=f"{raw_key}={raw_value}", path=path, partial=dict(states)
            )
        states[effect_id] = value != 0
    return states


def serialize_effect_states(registry: EffectRegistry, states: Mapping[int, bool]) -> str:
    """One ``id=0|1`` line per registered effect, in registry order.

    Effects absent from *states* are written enabled, matching a freshly built tree.
    """
    return "".join(f"{rec.id}={1 if states.get(rec.id, True) else 0}\n" for rec in registry)


# ---------------------------------------------------------------------------
# File-backed stores
# ---------------------------------------------------------------------------


def _read(path: Path) -> str:
    try:
        return read_text(path)
    except FileNotFoundError:
        raise FileMissingError(f"{path.name} does not exist", path=str(path)) from None


@dataclass
class ConfigStore:
    """Reads and writes ``config.ini``."""

    path: Path

    def read(self, base: Optional[ScalarConfig] = None) -> ScalarConfig:
        return parse_config(_read(self.path), base, path=str(self.path))

    def write(self, config: ScalarConfig) -> None:
        write_text_atomic(self.path, serialize_config(config))

    def load_or_regenerate(
        self,
        current: Optional[ScalarConfig] = None,
        on_incomplete: Optional[Callable[[IncompleteFileError], None]] = None,
        on_regenerate: Optional[Callable[[ParseError], None]] = None,
    ) -> ScalarConfig:
        """Parse the file, rewriting it from *current* until it parses.

        Values read before a failure are kept and end up in the rewritten file.
        Regeneration always produces a parseable file containing ``Seed``, so
        the loop ends after at most one rewrite.
        """
        current = current if current is not None else ScalarConfig()
        while True:
            try:
                return self.read(current)
            except ParseError as e:
                if isinstance(e.partial, ScalarConfig):
                    current = e.partial
                log.warning("Regenerating %s (%s): %s", self.path.name, e.reason, e)
                if isinstance(e, IncompleteFileError) and on_incomplete is not None:
                    on_incomplete(e)
                if on_regenerate is not None:
                    on_regenerate(e)
                self.write(current)


@dataclass
class EffectStateStore:
    """Reads and writes ``effects.ini`` for a given registry."""

    path: Path
    registry: EffectRegistry

    def read(self) -> Dict[int, bool]:
        return parse_effect_states(_read(self.path), path=str(self.path))

    def write(self, states: Mapping[int, bool]) -> None:
        write_text_atomic(self.path, serialize_effect_states(self.registry, states))

    def load_or_regenerate(
        self,
        current: Optional[Mapping[int, bool]] = None,
        on_regenerate: Optional[Callable[[ParseError], None]] = None,
    ) -> Dict[int, bool]:
        """Return *current* updated with the file's states, rewriting the file until it parses."""
        merged: Dict[int, bool] = dict(current or {})
        while True:
            try:
                merged.update(self.read())
                return merged
            except ParseError as e:
                if isinstance(e.partial, dict):
                    merged.update(e.partial)
                log.warning("Regenerating %s (%s): %s", self.path.name, e.reason, e)
                if on_regenerate is not None:
                    on_regenerate(e)
                self.write(merged)


__all__ = [
    "ScalarConfig",
    "ConfigStore",
    "EffectStateStore",
    "parse_config",
    "serialize_config",
    "parse_effect_states",
    "serialize_effect_states",
    "DEFAULT_SPAWN_INTERVAL",
    "DEFAULT_TIMED_DURATION",
    "DEFAULT_SEED",
]
