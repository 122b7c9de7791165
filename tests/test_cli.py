from __future__ import annotations

import io
from pathlib import Path

import pytest

from chaosmod_config import cli


@pytest.fixture(autouse=True)
def _no_log_setup(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda *a, **k: None)
    monkeypatch.delenv("CHAOSMOD_EFFECTS_DB", raising=False)


def _run(*argv: str) -> str:
    out = io.StringIO()
    assert cli.main(list(argv), out=out) == 0
    return out.getvalue()


def test_summary_creates_files(tmp_path: Path) -> None:
    text = _run("--workdir", str(tmp_path))
    assert "Seed:                (random)" in text
    assert (tmp_path / "config.ini").exists()
    assert (tmp_path / "effects.ini").exists()


def test_disable_effect_and_set_seed(tmp_path: Path) -> None:
    _run("--workdir", str(tmp_path), "--disable", "12", "--seed", "99", "--spawn-time", "30")

    effects = (tmp_path / "effects.ini").read_text(encoding="ascii").splitlines()
    assert "12=0" in effects
    config = (tmp_path / "config.ini").read_text(encoding="ascii")
    assert config == "NewEffectSpawnTime=30\nEffectTimedDur=180\nSeed=99\n"


def test_negative_seed_means_random(tmp_path: Path) -> None:
    _run("--workdir", str(tmp_path), "--seed", "5")
    _run("--workdir", str(tmp_path), "--seed", "-1")
    assert (tmp_path / "config.ini").read_text(encoding="ascii").endswith("Seed=-1\n")


def test_disable_category_shows_in_listing(tmp_path: Path) -> None:
    text = _run("--workdir", str(tmp_path), "--disable-category", "weather", "--list")
    assert "[ ] Weather" in text
    assert "[x] Player" in text


def test_unknown_effect_id_is_an_error(tmp_path: Path) -> None:
    assert cli.main(["--workdir", str(tmp_path), "--enable", "99999"], out=io.StringIO()) == 2


def test_bad_category_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        cli.main(["--workdir", str(tmp_path), "--enable-category", "boats"], out=io.StringIO())
