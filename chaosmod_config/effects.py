"""Static effect registry.

Every effect the mod can dispatch is listed here with its stable numeric id
(the key written to ``effects.ini``), display name and category. The list
order is the display order inside each category group and the line order of
``effects.ini``.

Power users can point ``CHAOSMOD_EFFECTS_DB`` at a JSON file to load a
different registry (e.g. for a newer mod build) without modifying the repo.
"""

from __future__ import annotations

import enum
import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence

LOGGER = logging.getLogger(__name__)

_ENV_EFFECTS_DB = "CHAOSMOD_EFFECTS_DB"


class EffectCategory(enum.Enum):
    PLAYER = "Player"
    VEHICLE = "Vehicle"
    PEDS = "Peds"
    TIME = "Time"
    WEATHER = "Weather"
    MISC = "Misc"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> "EffectCategory":
        """Accept either the enum name (``VEHICLE``) or the label (``Vehicle``)."""
        key = str(name or "").strip()
        for cat in cls:
            if key.upper() == cat.name or key.lower() == cat.value.lower():
                return cat
        raise ValueError(f"unknown effect category: {name!r}")


@dataclass(frozen=True)
class EffectRecord:
    key: str
    id: int
    name: str
    category: EffectCategory
    is_timed: bool = False


class EffectRegistry(Sequence[EffectRecord]):
    """Ordered, read-only collection of effects with lookup by key and id."""

    def __init__(self, records: Iterable[EffectRecord]):
        self._records: List[EffectRecord] = list(records)
        self._by_id: Dict[int, EffectRecord] = {}
        self._by_key: Dict[str, EffectRecord] = {}
        for rec in self._records:
            if rec.id in self._by_id:
                raise ValueError(f"duplicate effect id {rec.id} ({rec.key})")
            if rec.key in self._by_key:
                raise ValueError(f"duplicate effect key {rec.key}")
            self._by_id[rec.id] = rec
            self._by_key[rec.key] = rec

    def __getitem__(self, index):
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[EffectRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"EffectRegistry({len(self._records)} effects)"

    def by_id(self, effect_id: int) -> Optional[EffectRecord]:
        return self._by_id.get(int(effect_id))

    def by_key(self, key: str) -> Optional[EffectRecord]:
        return self._by_key.get(key)

    def ids(self) -> List[int]:
        return [rec.id for rec in self._records]

    def in_category(self, category: EffectCategory) -> List[EffectRecord]:
        return [rec for rec in self._records if rec.category is category]


def _rec(key: str, effect_id: int, name: str, category: EffectCategory, is_timed: bool = False) -> EffectRecord:
    return EffectRecord(key=key, id=effect_id, name=name, category=category, is_timed=is_timed)


_P = EffectCategory.PLAYER
_V = EffectCategory.VEHICLE
_PD = EffectCategory.PEDS
_T = EffectCategory.TIME
_W = EffectCategory.WEATHER
_M = EffectCategory.MISC

_DEFAULT_EFFECTS: List[EffectRecord] = [
    _rec("EFFECT_KILL", 0, "Suicide", _P),
    _rec("EFFECT_PLUS_2_STARS", 1, "+2 Wanted Stars", _P),
    _rec("EFFECT_5_STARS", 2, "5 Wanted Stars", _P),
    _rec("EFFECT_CLEAR_STARS", 3, "Clear Wanted Level", _P),
    _rec("EFFECT_STRIP_WEAPONS", 4, "Remove Weapons From Everyone", _P),
    _rec("EFFECT_GIVE_RPG", 5, "Give Everyone An RPG", _P),
    _rec("EFFECT_GIVE_MINIGUN", 6, "Give Everyone A Minigun", _P),
    _rec("EFFECT_GIVE_PARACHUTE", 7, "Give Everyone A Parachute", _P),
    _rec("EFFECT_HEAL", 8, "HESOYAM", _P),
    _rec("EFFECT_ARMOR", 9, "Give Everyone Armor", _P),
    _rec("EFFECT_IGNITE", 10, "Ignite Player", _P),
    _rec("EFFECT_ANCHOR_PLAYER", 11, "Anchor Player", _P),
    _rec("EFFECT_TP_LSAIRPORT", 12, "Teleport To LS Airport", _P),
    _rec("EFFECT_TP_MAZEBANKTOWER", 13, "Teleport To Top Of Maze Bank Tower", _P),
    _rec("EFFECT_TP_FORTZANCUDO", 14, "Teleport To Fort Zancudo", _P),
    _rec("EFFECT_TP_MOUNTCHILLIAD", 15, "Teleport To Mount Chilliad", _P),
    _rec("EFFECT_TP_SKYFALL", 16, "Teleport To Heaven", _P),
    _rec("EFFECT_NEVER_WANTED", 17, "Never Wanted", _P, True),
    _rec("EFFECT_NO_PHONE", 18, "No Phone", _P, True),
    _rec("EFFECT_PLAYER_INVINCIBLE", 19, "Invincibility", _P, True),
    _rec("EFFECT_SPAWN_ADDER", 20, "Spawn Adder", _V),
    _rec("EFFECT_SPAWN_DUMP", 21, "Spawn Dump Truck", _V),
    _rec("EFFECT_SPAWN_MONSTER", 22, "Spawn Monster Truck", _V),
    _rec("EFFECT_SPAWN_BUS", 23, "Spawn Bus", _V),
    _rec("EFFECT_SPAWN_BMX", 24, "Spawn BMX", _V),
    _rec("EFFECT_SPAWN_TUG", 25, "Spawn Tug", _V),
    _rec("EFFECT_EXPLODE_VEHS", 26, "Explode All Nearby Vehicles", _V),
    _rec("EFFECT_PLAYER_VEH_EXPLODE", 27, "Detonate Current Vehicle", _V),
    _rec("EFFECT_PLAYER_VEH_LOCK", 28, "Lock Player Inside Vehicle", _V, True),
    _rec("EFFECT_VEH_REPAIR_ALL", 29, "Repair All Vehicles", _V),
    _rec("EFFECT_VEH_POP_TIRES", 30, "Pop Tires Of Every Vehicle", _V),
    _rec("EFFECT_PEDS_RIOT", 31, "Peds Riot", _PD, True),
    _rec("EFFECT_PEDS_INVISIBLE", 32, "Everyone Is A Ghost", _PD, True),
    _rec("EFFECT_PEDS_SPAWN_CHIMP", 33, "Spawn Companion Chimp", _PD),
    _rec("EFFECT_PEDS_SPAWN_BRAD", 34, "Spawn Companion Brad", _PD),
    _rec("EFFECT_PEDS_SPAWN_IMPOTENT_RAGE", 35, "Spawn Impotent Rage", _PD),
    _rec("EFFECT_PEDS_EXIT_VEH", 36, "Everyone Exits Their Vehicles", _PD),
    _rec("EFFECT_PEDS_NO_RAGDOLL", 37, "No Ragdoll", _PD, True),
    _rec("EFFECT_TIME_MORNING", 38, "Set Time To Morning", _T),
    _rec("EFFECT_TIME_DAY", 39, "Set Time To Daytime", _T),
    _rec("EFFECT_TIME_EVENING", 40, "Set Time To Evening", _T),
    _rec("EFFECT_TIME_NIGHT", 41, "Set Time To Night", _T),
    _rec("EFFECT_GAMESPEED_X02", 42, "x0.2 Gamespeed", _T, True),
    _rec("EFFECT_GAMESPEED_X05", 43, "x0.5 Gamespeed", _T, True),
    _rec("EFFECT_WEATHER_SUNNY", 44, "Sunny Weather", _W),
    _rec("EFFECT_WEATHER_EXTRASUNNY", 45, "Extra Sunny Weather", _W),
    _rec("EFFECT_WEATHER_THUNDER", 46, "Stormy Weather", _W),
    _rec("EFFECT_WEATHER_FOGGY", 47, "Foggy Weather", _W),
    _rec("EFFECT_WEATHER_XMAS", 48, "Snowy Weather", _W),
    _rec("EFFECT_NO_HUD", 49, "No HUD", _M, True),
    _rec("EFFECT_NO_RADAR", 50, "No Radar", _M, True),
    _rec("EFFECT_EARTHQUAKE", 51, "Earthquake", _M, True),
]


def _record_from_json(item: Dict[str, Any]) -> EffectRecord:
    return EffectRecord(
        key=str(item.get("key") or f"EFFECT_{int(item['id'])}"),
        id=int(item["id"]),
        name=str(item.get("name") or item.get("key") or item["id"]),
        category=EffectCategory.parse(str(item.get("category") or "MISC")),
        is_timed=bool(item.get("is_timed", False)),
    )


def load_registry_file(path: Path) -> EffectRegistry:
    """Load a registry from a JSON list of ``{id, name, category, ...}`` objects."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("effects")
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of effect records")
    return EffectRegistry(_record_from_json(item) for item in data)


def default_registry() -> EffectRegistry:
    """Bundled registry, or the JSON file named by ``CHAOSMOD_EFFECTS_DB``."""
    env = (os.environ.get(_ENV_EFFECTS_DB) or "").strip()
    if env:
        path = Path(env).expanduser()
        try:
            registry = load_registry_file(path)
            LOGGER.info("Loaded %d effects from %s", len(registry), path)
            return registry
        except (OSError, ValueError, KeyError, TypeError) as e:
            LOGGER.warning("Ignoring effect registry override %s: %s: %s", path, type(e).__name__, e)
    return EffectRegistry(_DEFAULT_EFFECTS)


__all__ = [
    "EffectCategory",
    "EffectRecord",
    "EffectRegistry",
    "default_registry",
    "load_registry_file",
]
