"""GUI application entrypoint."""

from __future__ import annotations

import argparse
import logging
import tkinter as tk
from pathlib import Path
from tkinter import messagebox, ttk
from typing import Dict, List, Optional

from .. import __version__ as TOOL_VERSION
from ..log_utils import setup_logging
from ..workdir import resolve_layout
from .controller import SettingsController
from .panels import panel_effects, panel_logs, panel_misc
from .panels.panel_misc import MISC_FIELDS

__version__ = TOOL_VERSION
logger = logging.getLogger(__name__)

APP_TITLE = "ChaosModV"
INCOMPLETE_CONFIG_MESSAGE = "Your config file was incomplete and thus has been regenerated."
SAVED_MESSAGE = "Saved Config!"


class ConfigApp(tk.Tk):
    """Main window: notebook with Effects / Misc / Logs tabs and a Save button."""

    TAB_LABELS = (
        ("effects", "Effects"),
        ("misc", "Misc"),
        ("logs", "Logs"),
    )

    def __init__(self, controller: Optional[SettingsController] = None, *, workdir: Optional[Path] = None):
        super().__init__()
        self.title(f"{APP_TITLE} Config v{__version__}")
        self.geometry("560x640")

        self.var_spawn_interval = tk.StringVar(master=self, value="")
        self.var_timed_duration = tk.StringVar(master=self, value="")
        self.var_seed = tk.StringVar(master=self, value="")
        self.effects_view = None

        self.controller = controller or SettingsController(resolve_layout(workdir))
        # The warning is modal and must be shown before any value is on screen.
        self.controller.events.on_incomplete_config(self._warn_incomplete_config)
        self.controller.start()
        self._form_to_vars()

        self._init_notebook()

        bottom = ttk.Frame(self)
        bottom.pack(fill=tk.X, padx=10, pady=(0, 10))
        self.status_var = tk.StringVar(master=self, value=str(self.controller.layout.root))
        ttk.Label(bottom, textvariable=self.status_var, foreground="#616161").pack(side=tk.LEFT)
        ttk.Button(bottom, text="Save", command=self._on_save).pack(side=tk.RIGHT)

        self.bind("<Control-s>", lambda _e: self._on_save())

    def _init_notebook(self) -> None:
        logger.info("Initializing notebook UI")
        self.main_notebook = ttk.Notebook(self)
        self.main_notebook.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        self.panel_frames: Dict[str, ttk.Frame] = {
            "effects": panel_effects.build_panel(self.main_notebook, app=self),
            "misc": panel_misc.build_panel(self.main_notebook, app=self),
            "logs": panel_logs.build_panel(self.main_notebook, app=self),
        }
        for key, label in self.TAB_LABELS:
            self.main_notebook.add(self.panel_frames[key], text=label)

    # ------------------------------------------------------------------
    # Form <-> Tk variables
    # ------------------------------------------------------------------

    def _form_to_vars(self) -> None:
        for attr, _label, _hint in MISC_FIELDS:
            getattr(self, f"var_{attr}").set(getattr(self.controller.form, attr))

    def _vars_to_form(self) -> None:
        for attr, _label, _hint in MISC_FIELDS:
            setattr(self.controller.form, attr, getattr(self, f"var_{attr}").get())

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _warn_incomplete_config(self) -> None:
        messagebox.showwarning(APP_TITLE, INCOMPLETE_CONFIG_MESSAGE, parent=self)

    def _on_save(self) -> None:
        self._vars_to_form()
        try:
            self.controller.save()
        except (OSError, ValueError) as e:
            logger.exception("Failed to save config")
            messagebox.showerror(APP_TITLE, f"Could not save config: {e}", parent=self)
            return
        self.status_var.set(f"Saved to {self.controller.layout.root}")
        messagebox.showinfo(APP_TITLE, SAVED_MESSAGE, parent=self)


def main(argv: Optional[List[str]] = None) -> None:
    """Start the Tk GUI application."""
    ap = argparse.ArgumentParser(description="ChaosModV settings editor")
    ap.add_argument("--workdir", type=Path, default=None, help="Folder holding config.ini and effects.ini")
    args = ap.parse_args(argv)

    log_path = setup_logging()
    if log_path:
        print(f"[LOG] {log_path}")
    app = ConfigApp(workdir=args.workdir)
    app.mainloop()


__all__ = ["ConfigApp", "main"]
