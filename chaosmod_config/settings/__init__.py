"""Persistent settings for ChaosModV.

Two flat ``key=value`` files live in the mod's working directory:

  * ``config.ini``  -- spawn interval, timed-effect duration, random seed
  * ``effects.ini`` -- one ``<effect id>=<0|1>`` line per registered effect

Design goals:
  * Tolerant loads (blank or malformed lines are skipped)
  * Self-healing (a file that fails to parse is regenerated from known-good values)
  * Atomic writes
"""

from .errors import (
    EmptyFileError,
    FileMissingError,
    IncompleteFileError,
    MalformedValueError,
    ParseError,
)
from .store import (
    ConfigStore,
    EffectStateStore,
    ScalarConfig,
    parse_config,
    parse_effect_states,
    serialize_config,
    serialize_effect_states,
)

__all__ = [
    "ConfigStore",
    "EffectStateStore",
    "ScalarConfig",
    "parse_config",
    "parse_effect_states",
    "serialize_config",
    "serialize_effect_states",
    "ParseError",
    "FileMissingError",
    "EmptyFileError",
    "MalformedValueError",
    "IncompleteFileError",
]
