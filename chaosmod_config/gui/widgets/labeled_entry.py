"""Reusable label + entry composite widget."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk


def _digits_only(proposed: str) -> bool:
    return proposed == "" or (proposed.isascii() and proposed.isdigit())


class LabeledEntry(ttk.Frame):
    """Label + entry. With ``numeric=True`` every keystroke or paste that would
    leave anything but digits in the field is rejected."""

    def __init__(
        self,
        master: tk.Misc,
        label: str,
        *,
        textvariable: tk.StringVar | None = None,
        width: int = 12,
        numeric: bool = False,
    ):
        super().__init__(master)
        self.variable = textvariable or tk.StringVar(master=master)
        self.label = ttk.Label(self, text=label)
        self.label.grid(row=0, column=0, sticky="w")
        self.entry = ttk.Entry(self, textvariable=self.variable, width=width)
        if numeric:
            vcmd = (self.register(_digits_only), "%P")
            self.entry.configure(validate="key", validatecommand=vcmd)
        self.entry.grid(row=0, column=1, sticky="w", padx=(4, 0))

    def get(self) -> str:
        return self.variable.get()

    def set(self, value: str) -> None:
        self.variable.set(value)
