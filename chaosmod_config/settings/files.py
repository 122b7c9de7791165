from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

import chardet

log = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def read_text(path: PathLike) -> str:
    """Read a small ini file, tolerating whatever encoding an editor saved it in.

    UTF-8 is tried first; anything else goes through chardet. A leading BOM is
    dropped. Raises FileNotFoundError if the file does not exist.
    """
    raw = Path(path).read_bytes()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        guess = chardet.detect(raw)
        codec = guess.get("encoding") if guess and (guess.get("confidence") or 0) >= 0.8 else None
        log.debug("%s is not utf-8, chardet guessed %s", path, guess)
        try:
            text = raw.decode(codec or "utf-8")
        except (UnicodeDecodeError, LookupError):
            text = raw.decode("latin-1", errors="replace")
    return text.lstrip("\ufeff")


def write_text_atomic(path: PathLike, text: str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    # newline="" keeps "\n" on Windows too; the mod reads plain LF files.
    with open(tmp, "w", encoding="ascii", errors="replace", newline="") as fp:
        fp.write(text)
    os.replace(tmp, path)


__all__ = ["read_text", "write_text_atomic"]
