"""Settings controller (no Tk widget code).

Owns the effects tree, the two file stores and the scalar form values, and
sequences startup:

    UNINITIALIZED -> TREE_BUILT -> CONFIG_LOADED -> EFFECTS_LOADED -> READY

The tree has to exist before effects.ini is applied, because states are
pushed onto leaves looked up by effect id. Keep this free of tkinter/ttk
imports so it can be unit-tested headlessly.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

from ..check_tree import CheckTree, apply_effect_states, build_effect_tree, collect_effect_states
from ..effects import EffectCategory, EffectRegistry, default_registry
from ..settings import ConfigStore, EffectStateStore, IncompleteFileError, ParseError, ScalarConfig
from ..workdir import WorkDirLayout, resolve_layout
from .events import ConfigEvents
from .state import ControllerState, ControllerStateError, ScalarForm

log = logging.getLogger(__name__)


class SettingsController:
    def __init__(
        self,
        layout: Optional[WorkDirLayout] = None,
        registry: Optional[EffectRegistry] = None,
        events: Optional[ConfigEvents] = None,
    ) -> None:
        self.layout = layout or resolve_layout()
        self.registry = registry if registry is not None else default_registry()
        self.events = events or ConfigEvents()
        self.config_store = ConfigStore(self.layout.config_path)
        self.effects_store = EffectStateStore(self.layout.effects_path, self.registry)
        self.form = ScalarForm()
        self.state = ControllerState.UNINITIALIZED

        self.tree: Optional[CheckTree] = None
        self.leaf_by_id: Dict[int, int] = {}
        self.group_by_category: Dict[EffectCategory, int] = {}

    # ------------------------------------------------------------------
    # Startup
    # ------------------------------------------------------------------

    def _require(self, expected: ControllerState, action: str) -> None:
        if self.state != expected:
            raise ControllerStateError(f"cannot {action} in state {self.state.name} (expected {expected.name})")

    def build_tree(self) -> CheckTree:
        self._require(ControllerState.UNINITIALIZED, "build the effects tree")
        self.tree, self.leaf_by_id, self.group_by_category = build_effect_tree(
            self.registry, on_change=self.events.emit_node_changed
        )
        self.state = ControllerState.TREE_BUILT
        log.debug("Built effects tree: %d effects, %d nodes", len(self.registry), len(self.tree))
        return self.tree

    def load_config(self) -> ScalarConfig:
        self._require(ControllerState.TREE_BUILT, "load config.ini")

        def _incomplete(_err: IncompleteFileError) -> None:
            self.events.emit_incomplete_config()

        def _regenerated(err: ParseError) -> None:
            self.events.emit_config_regenerated(err.reason)

        config = self.config_store.load_or_regenerate(
            self.form.to_config(), on_incomplete=_incomplete, on_regenerate=_regenerated
        )
        self.form.apply_config(config)
        self.state = ControllerState.CONFIG_LOADED
        return config

    def load_effects(self) -> Dict[int, bool]:
        self._require(ControllerState.CONFIG_LOADED, "load effects.ini")
        assert self.tree is not None

        def _regenerated(err: ParseError) -> None:
            self.events.emit_effects_regenerated(err.reason)

        states = self.effects_store.load_or_regenerate(
            collect_effect_states(self.tree, self.leaf_by_id), on_regenerate=_regenerated
        )
        unknown = apply_effect_states(self.tree, self.leaf_by_id, states)
        if unknown:
            log.debug("Ignoring unknown effect ids in %s: %s", self.layout.effects_path.name, sorted(unknown))
        self.state = ControllerState.EFFECTS_LOADED
        return states

    def start(self) -> "SettingsController":
        """Run the whole startup sequence up to READY."""
        self.build_tree()
        self.load_config()
        self.load_effects()
        self.state = ControllerState.READY
        log.info("Loaded settings from %s", self.layout.root)
        return self

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------

    def save(self) -> bool:
        """Write both files from the current form and tree. Repeatable."""
        self._require(ControllerState.READY, "save")
        assert self.tree is not None
        self.config_store.write(self.form.to_config())
        self.effects_store.write(collect_effect_states(self.tree, self.leaf_by_id))
        paths: List[Path] = [self.layout.config_path, self.layout.effects_path]
        log.info("Saved %s", ", ".join(str(p) for p in paths))
        self.events.emit_saved(paths)
        return True

    # ------------------------------------------------------------------
    # Tree helpers used by the GUI and CLI
    # ------------------------------------------------------------------

    def _tree(self) -> CheckTree:
        if self.tree is None:
            raise ControllerStateError("effects tree has not been built")
        return self.tree

    def set_effect_enabled(self, effect_id: int, enabled: bool) -> None:
        leaf = self.leaf_by_id.get(int(effect_id))
        if leaf is None:
            raise KeyError(f"unknown effect id {effect_id}")
        self._tree().set_checked(leaf, enabled)

    def set_category_enabled(self, category: EffectCategory, enabled: bool) -> None:
        self._tree().set_checked(self.group_by_category[category], enabled)

    def toggle(self, node: int) -> bool:
        return self._tree().toggle(node)

    def is_effect_enabled(self, effect_id: int) -> bool:
        return self._tree().is_checked(self.leaf_by_id[int(effect_id)])

    def enabled_effect_ids(self) -> List[int]:
        tree = self._tree()
        return [rec.id for rec in self.registry if tree.is_checked(self.leaf_by_id[rec.id])]


__all__ = ["SettingsController"]
