from __future__ import annotations

import tkinter as tk
from pathlib import Path

import pytest

from chaosmod_config.effects import EffectCategory, EffectRecord, EffectRegistry
from chaosmod_config.gui.controller import SettingsController
from chaosmod_config.gui.widgets.check_treeview import CHECKED, UNCHECKED, CheckTreeView
from chaosmod_config.workdir import resolve_layout


def _registry() -> EffectRegistry:
    return EffectRegistry(
        [
            EffectRecord("P1", 1, "Player one", EffectCategory.PLAYER),
            EffectRecord("V1", 10, "Vehicle one", EffectCategory.VEHICLE),
            EffectRecord("V2", 11, "Vehicle two", EffectCategory.VEHICLE),
        ]
    )


def _tk_root() -> tk.Tk:
    try:
        root = tk.Tk()
    except tk.TclError as exc:
        pytest.skip(f"Tk not available in environment: {exc}")
    root.withdraw()
    return root


def test_check_treeview_follows_model(tmp_path: Path) -> None:
    root = _tk_root()
    controller = SettingsController(resolve_layout(tmp_path), registry=_registry()).start()
    view = CheckTreeView(root, controller.tree)
    view.pack()

    vehicle = controller.group_by_category[EffectCategory.VEHICLE]
    assert view.view.item(f"n{vehicle}", "values")[0] == CHECKED

    controller.set_category_enabled(EffectCategory.VEHICLE, False)
    assert view.view.item(f"n{vehicle}", "values")[0] == UNCHECKED
    leaf = controller.leaf_by_id[10]
    assert view.view.item(f"n{leaf}", "values")[0] == UNCHECKED

    view.view.selection_set(f"n{leaf}")
    view._on_space()
    assert controller.is_effect_enabled(10)
    assert view.view.item(f"n{vehicle}", "values")[0] == CHECKED

    root.destroy()


def test_app_builds_and_saves(tmp_path: Path, monkeypatch) -> None:
    try:
        root = tk.Tk()
    except tk.TclError as exc:
        pytest.skip(f"Tk not available in environment: {exc}")
    root.destroy()

    from chaosmod_config.gui import app as app_mod

    shown = []
    monkeypatch.setattr(app_mod.messagebox, "showinfo", lambda *a, **k: shown.append(a[1]))

    controller = SettingsController(resolve_layout(tmp_path), registry=_registry())
    app = app_mod.ConfigApp(controller)
    app.withdraw()
    try:
        assert set(app.panel_frames) == {"effects", "misc", "logs"}
        assert app.var_spawn_interval.get() == "60"

        app.var_seed.set("77")
        app._on_save()
        assert shown == [app_mod.SAVED_MESSAGE]
        assert (tmp_path / "config.ini").read_text(encoding="ascii").endswith("Seed=77\n")
    finally:
        app.destroy()
