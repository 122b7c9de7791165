"""Effects tab: checkbox tree grouped by category."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from ..widgets.check_treeview import CheckTreeView


def build_panel(parent, app=None) -> ttk.Frame:
    frame = ttk.Frame(parent)
    frame.columnconfigure(0, weight=1)
    frame.rowconfigure(1, weight=1)

    controller = app.controller
    tree = controller.tree

    ttk.Label(
        frame,
        text="Tick the effects that may be dispatched. Toggling a category applies to all of its effects.",
    ).grid(row=0, column=0, sticky="w", padx=12, pady=(12, 6))

    view = CheckTreeView(frame, tree)
    view.grid(row=1, column=0, sticky="nsew", padx=12)
    app.effects_view = view

    actions = ttk.Frame(frame)
    actions.grid(row=2, column=0, sticky="ew", padx=12, pady=(6, 12))

    def _set_all(value: bool) -> None:
        for root in tree.roots():
            tree.set_checked(root, value)

    def _set_open(value: bool) -> None:
        for root in tree.roots():
            view.view.item(f"n{root}", open=value)

    ttk.Button(actions, text="Enable all", command=lambda: _set_all(True)).pack(side=tk.LEFT)
    ttk.Button(actions, text="Disable all", command=lambda: _set_all(False)).pack(side=tk.LEFT, padx=(8, 0))
    ttk.Button(actions, text="Expand", command=lambda: _set_open(True)).pack(side=tk.LEFT, padx=(8, 0))
    ttk.Button(actions, text="Collapse", command=lambda: _set_open(False)).pack(side=tk.LEFT, padx=(8, 0))

    count_var = tk.StringVar(master=frame)
    ttk.Label(actions, textvariable=count_var).pack(side=tk.RIGHT)

    def _update_count(*_args) -> None:
        count_var.set(f"{len(controller.enabled_effect_ids())}/{len(controller.registry)} enabled")

    tree.subscribe(_update_count)
    frame.bind("<Destroy>", lambda e: tree.unsubscribe(_update_count) if e.widget is frame else None, add="+")
    _update_count()
    return frame
