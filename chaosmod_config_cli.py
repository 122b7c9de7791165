#!/usr/bin/env python3
"""Convenience launcher for the command line front-end.

Run from the game folder (next to config.ini / effects.ini) or pass --workdir.
"""

from chaosmod_config.cli import main as _main


if __name__ == "__main__":
    raise SystemExit(_main())
