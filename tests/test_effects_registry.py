from __future__ import annotations

import json
from pathlib import Path

import pytest

from chaosmod_config.effects import (
    EffectCategory,
    EffectRecord,
    EffectRegistry,
    default_registry,
    load_registry_file,
)


def test_default_registry_is_consistent(monkeypatch) -> None:
    monkeypatch.delenv("CHAOSMOD_EFFECTS_DB", raising=False)
    registry = default_registry()

    assert len(registry) > 0
    assert len(set(registry.ids())) == len(registry)
    # every category has at least one effect so no group node is empty
    for cat in EffectCategory:
        assert registry.in_category(cat), cat
    assert registry.by_key("EFFECT_NEVER_WANTED").is_timed


def test_lookup_by_id_and_key() -> None:
    rec = EffectRecord("EFFECT_X", 7, "X", EffectCategory.MISC)
    registry = EffectRegistry([rec])
    assert registry.by_id(7) is rec
    assert registry.by_key("EFFECT_X") is rec
    assert registry.by_id(8) is None
    assert registry[0] is rec


def test_duplicate_ids_rejected() -> None:
    with pytest.raises(ValueError):
        EffectRegistry(
            [
                EffectRecord("A", 1, "A", EffectCategory.MISC),
                EffectRecord("B", 1, "B", EffectCategory.MISC),
            ]
        )


def test_category_parse_accepts_name_or_label() -> None:
    assert EffectCategory.parse("VEHICLE") is EffectCategory.VEHICLE
    assert EffectCategory.parse("weather") is EffectCategory.WEATHER
    with pytest.raises(ValueError):
        EffectCategory.parse("boats")


def test_registry_override_from_env(tmp_path: Path, monkeypatch) -> None:
    db = tmp_path / "effects.json"
    db.write_text(
        json.dumps(
            [
                {"key": "EFFECT_A", "id": 100, "name": "A", "category": "Peds"},
                {"id": 101, "name": "B", "category": "TIME", "is_timed": True},
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("CHAOSMOD_EFFECTS_DB", str(db))

    registry = default_registry()
    assert registry.ids() == [100, 101]
    assert registry.by_id(101).category is EffectCategory.TIME
    assert registry.by_id(101).key == "EFFECT_101"
    assert load_registry_file(db).ids() == [100, 101]


def test_broken_override_falls_back_to_bundled(tmp_path: Path, monkeypatch) -> None:
    db = tmp_path / "effects.json"
    db.write_text("{not json", encoding="utf-8")
    monkeypatch.setenv("CHAOSMOD_EFFECTS_DB", str(db))

    registry = default_registry()
    assert registry.by_key("EFFECT_KILL") is not None
