"""Tk GUI package for the ChaosModV settings editor.

Importing this package does not import tkinter; only :mod:`.app` and the
panels/widgets need it. The controller, events and state modules are usable
headlessly.
"""

from __future__ import annotations

from typing import Any

__all__ = ["ConfigApp", "main"]


def __getattr__(name: str) -> Any:
    if name in {"ConfigApp", "main"}:
        from .app import ConfigApp, main

        return {"ConfigApp": ConfigApp, "main": main}[name]
    raise AttributeError(name)
