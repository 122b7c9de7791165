from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

CONFIG_FILE = "config.ini"
EFFECTS_FILE = "effects.ini"

_ENV_CONFIG_DIR = "CHAOSMOD_CONFIG_DIR"


@dataclass(frozen=True)
class WorkDirLayout:
    root: Path
    config_path: Path
    effects_path: Path


def resolve_layout(root: Optional[Path] = None) -> WorkDirLayout:
    """Locate the directory holding config.ini / effects.ini and make sure it exists.

    Precedence: explicit *root*, then ``CHAOSMOD_CONFIG_DIR``, then the current
    working directory (the mod reads both files from next to the game executable).
    """
    if root is None:
        env = (os.environ.get(_ENV_CONFIG_DIR) or "").strip()
        root = Path(env) if env else Path.cwd()
    root = Path(root).expanduser().resolve()
    root.mkdir(parents=True, exist_ok=True)
    return WorkDirLayout(root=root, config_path=root / CONFIG_FILE, effects_path=root / EFFECTS_FILE)
