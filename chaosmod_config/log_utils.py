"""Logging-related utilities.

No tkinter imports here so the CLI can share the same setup as the GUI.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_FILENAME = "config_app.log"


def app_home() -> Path:
    return Path.home() / ".chaosmod_config"


def log_candidates() -> List[Path]:
    """Places a log file may have been written to, most local first."""
    return [Path.cwd() / LOG_FILENAME, app_home() / LOG_FILENAME]


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    target = str(path.resolve())
    return any(
        isinstance(h, logging.FileHandler) and str(Path(h.baseFilename).resolve()) == target for h in logger.handlers
    )


def setup_logging(level: int = logging.INFO, *, log_dir: Optional[Path] = None) -> Optional[str]:
    """Configure logging to a persistent file plus stdout.

    The GUI is usually started without a visible console, so the log file is
    the only place a crash leaves a trace. Returns the log path, or None if
    the file could not be opened.
    """

    try:
        log_dir = Path(log_dir) if log_dir is not None else app_home()
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / LOG_FILENAME

        # Don't clobber an existing logging configuration (e.g. under pytest).
        root = logging.getLogger()
        if not root.handlers:
            logging.basicConfig(
                level=level,
                format=LOG_FORMAT,
                handlers=[
                    logging.FileHandler(str(log_path), mode="a", encoding="utf-8"),
                    logging.StreamHandler(sys.stdout),
                ],
            )

        # Also keep a copy next to the ini files, where users look first.
        local_path = Path.cwd() / LOG_FILENAME
        if local_path.resolve() != log_path.resolve() and not _has_file_handler(root, local_path):
            try:
                fh = logging.FileHandler(str(local_path), mode="a", encoding="utf-8")
            except OSError:
                pass
            else:
                fh.setFormatter(logging.Formatter(LOG_FORMAT))
                root.addHandler(fh)

        def _excepthook(exc_type, exc, tb):
            if issubclass(exc_type, KeyboardInterrupt):
                sys.__excepthook__(exc_type, exc, tb)
                return
            logging.error("Unhandled exception", exc_info=(exc_type, exc, tb))
            sys.__excepthook__(exc_type, exc, tb)

        sys.excepthook = _excepthook

        logging.info("chaosmod_config started (v%s)", __version__)
        return str(log_path)
    except OSError:
        return None


def read_log_tail(max_lines: int = 500) -> str:
    """Last *max_lines* lines of the first existing log file."""
    for path in log_candidates():
        if path.exists():
            try:
                lines = path.read_text(encoding="utf-8", errors="replace").splitlines()
            except OSError:
                continue
            return "\n".join(lines[-max_lines:])
    return ""


__all__ = ["setup_logging", "log_candidates", "read_log_tail", "app_home"]
