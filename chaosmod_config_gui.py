#!/usr/bin/env python3
"""Convenience GUI launcher.

The GUI implementation lives in `chaosmod_config.gui.app`.
"""

from chaosmod_config.gui.app import main


if __name__ == "__main__":
    main()
