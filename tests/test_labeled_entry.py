from __future__ import annotations

import pytest

from chaosmod_config.gui.widgets.labeled_entry import _digits_only


@pytest.mark.parametrize("text", ["", "0", "123", "2147483647"])
def test_digits_only_accepts_ascii_digits(text: str) -> None:
    assert _digits_only(text)


@pytest.mark.parametrize("text", ["²", "١٢", "12a", "-1", " 1", "1.5"])
def test_digits_only_rejects_everything_else(text: str) -> None:
    assert not _digits_only(text)
