"""Misc tab: effect spawn interval, timed-effect duration and random seed."""

from __future__ import annotations

from tkinter import ttk

from ...settings.store import DEFAULT_SPAWN_INTERVAL, DEFAULT_TIMED_DURATION
from ..widgets.labeled_entry import LabeledEntry

# (form attribute, label, hint)
MISC_FIELDS = (
    ("spawn_interval", "New effect spawn time (seconds)", f"Empty uses {DEFAULT_SPAWN_INTERVAL}."),
    ("timed_duration", "Timed effect duration (seconds)", f"Empty uses {DEFAULT_TIMED_DURATION}."),
    ("seed", "Random seed", "Leave empty for a random seed."),
)


def build_panel(parent, app=None) -> ttk.Frame:
    frame = ttk.Frame(parent)
    frame.columnconfigure(0, weight=1)

    for row, (attr, label, hint) in enumerate(MISC_FIELDS):
        var = getattr(app, f"var_{attr}")
        entry = LabeledEntry(frame, label, textvariable=var, width=10, numeric=True)
        entry.label.configure(width=32)
        entry.grid(row=row * 2, column=0, sticky="w", padx=12, pady=(12 if row == 0 else 8, 0))
        ttk.Label(frame, text=hint, foreground="#616161").grid(row=row * 2 + 1, column=0, sticky="w", padx=12)

    return frame
