"""Settings editor for the ChaosModV game modification.

Edits ``config.ini`` (spawn timing and random seed) and ``effects.ini``
(per-effect enable flags) through a checkbox tree grouped by category.
"""

__version__ = "0.3.0"
