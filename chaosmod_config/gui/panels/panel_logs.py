"""Logs panel with file shortcut and error copy helper."""

from __future__ import annotations

import subprocess
import sys
import tkinter as tk
from pathlib import Path
from tkinter import messagebox, ttk

from ...log_utils import LOG_FILENAME, log_candidates, read_log_tail


def _open_path(path: Path) -> None:
    if not path.exists():
        raise FileNotFoundError(path)
    if sys.platform.startswith("win"):
        subprocess.Popen(["notepad", str(path)])
    elif sys.platform == "darwin":
        subprocess.Popen(["open", str(path)])
    else:
        subprocess.Popen(["xdg-open", str(path)])


def build_panel(parent, app=None) -> ttk.Frame:
    frame = ttk.Frame(parent)
    frame.columnconfigure(0, weight=1)
    frame.rowconfigure(0, weight=1)

    box = tk.Text(frame, wrap="word", state="disabled", height=12)
    box.grid(row=0, column=0, sticky="nsew", padx=12, pady=(12, 8))

    actions = ttk.Frame(frame)
    actions.grid(row=1, column=0, sticky="ew", padx=12, pady=(0, 12))

    def _refresh() -> None:
        content = read_log_tail() or f"No {LOG_FILENAME} found yet."
        box.configure(state="normal")
        box.delete("1.0", tk.END)
        box.insert("1.0", content)
        box.configure(state="disabled")
        box.see(tk.END)

    def _open_log() -> None:
        for p in log_candidates():
            if p.exists():
                try:
                    _open_path(p)
                except OSError as e:
                    messagebox.showerror(LOG_FILENAME, f"Could not open {p}: {e}")
                return
        messagebox.showinfo(LOG_FILENAME, f"No {LOG_FILENAME} found.")

    def _copy_last_error() -> None:
        lines = read_log_tail().splitlines()
        error_lines = [ln for ln in lines if "error" in ln.lower() or "traceback" in ln.lower()]
        text = "\n".join(error_lines[-20:]).strip() or f"No error line found in {LOG_FILENAME}."
        frame.clipboard_clear()
        frame.clipboard_append(text)
        messagebox.showinfo("Logs", "Last error copied to clipboard.")

    ttk.Button(actions, text="Refresh", command=_refresh).pack(side=tk.LEFT)
    ttk.Button(actions, text=f"Open {LOG_FILENAME}", command=_open_log).pack(side=tk.LEFT, padx=(8, 0))
    ttk.Button(actions, text="Copy last error", command=_copy_last_error).pack(side=tk.LEFT, padx=(8, 0))

    frame.refresh = _refresh  # type: ignore[attr-defined]
    _refresh()
    return frame
