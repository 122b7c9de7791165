"""Simple event registry decoupling the controller from Tk widgets."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Sequence


class ConfigEvents:
    """Small callback-based event hub used by the Tk GUI."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Callable[..., None]]] = {
            "node_changed": [],
            "config_regenerated": [],
            "effects_regenerated": [],
            "incomplete_config": [],
            "saved": [],
        }

    def on_node_changed(self, callback: Callable[[int, bool], None]) -> None:
        self._listeners["node_changed"].append(callback)

    def on_config_regenerated(self, callback: Callable[[str], None]) -> None:
        self._listeners["config_regenerated"].append(callback)

    def on_effects_regenerated(self, callback: Callable[[str], None]) -> None:
        self._listeners["effects_regenerated"].append(callback)

    def on_incomplete_config(self, callback: Callable[[], None]) -> None:
        self._listeners["incomplete_config"].append(callback)

    def on_saved(self, callback: Callable[[Sequence[Any]], None]) -> None:
        self._listeners["saved"].append(callback)

    def emit_node_changed(self, index: int, checked: bool) -> None:
        for callback in self._listeners["node_changed"]:
            callback(index, checked)

    def emit_config_regenerated(self, reason: str) -> None:
        for callback in self._listeners["config_regenerated"]:
            callback(reason)

    def emit_effects_regenerated(self, reason: str) -> None:
        for callback in self._listeners["effects_regenerated"]:
            callback(reason)

    def emit_incomplete_config(self) -> None:
        for callback in self._listeners["incomplete_config"]:
            callback()

    def emit_saved(self, paths: Sequence[Any]) -> None:
        for callback in self._listeners["saved"]:
            callback(paths)


__all__ = ["ConfigEvents"]
