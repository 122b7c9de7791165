from __future__ import annotations

from pathlib import Path

import pytest

from chaosmod_config.settings import parse_config
from chaosmod_config.settings.files import read_text, write_text_atomic


def test_read_strips_utf8_bom(tmp_path: Path) -> None:
    p = tmp_path / "config.ini"
    p.write_bytes(b"\xef\xbb\xbfSeed=4\n")
    text = read_text(p)
    assert text == "Seed=4\n"
    assert parse_config(text).seed == 4


def test_read_utf16_file_saved_by_notepad(tmp_path: Path) -> None:
    p = tmp_path / "config.ini"
    p.write_bytes("NewEffectSpawnTime=30\r\nSeed=8\r\n".encode("utf-16"))
    config = parse_config(read_text(p))
    assert config.spawn_interval == 30
    assert config.seed == 8


def test_read_missing_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_text(tmp_path / "nope.ini")


def test_atomic_write_uses_lf_and_leaves_no_tmp(tmp_path: Path) -> None:
    p = tmp_path / "sub" / "effects.ini"
    write_text_atomic(p, "1=1\n2=0\n")
    assert p.read_bytes() == b"1=1\n2=0\n"
    assert not list(p.parent.glob("*.tmp"))
