"""Parse failures raised by the ini readers.

Every failure is recoverable: the load loops in :mod:`.store` answer it by
rewriting the file from known-good values and parsing again.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class ParseError(ValueError):
    """Base class. ``partial`` holds whatever was parsed before the failure."""

    reason = "invalid"

    def __init__(self, message: str, *, path: Optional[str] = None, partial: Any = None):
        super().__init__(message)
        self.path = path
        self.partial = partial


class FileMissingError(ParseError):
    reason = "missing"


class EmptyFileError(ParseError):
    reason = "empty"


class MalformedValueError(ParseError):
    reason = "malformed"

    def __init__(self, message: str, *, lineno: int, line: str, path: Optional[str] = None, partial: Any = None):
        super().__init__(f"line {lineno}: {message}: {line!r}", path=path, partial=partial)
        self.lineno = lineno
        self.line = line


class IncompleteFileError(ParseError):
    reason = "incomplete"

    def __init__(self, missing: Sequence[str], *, path: Optional[str] = None, partial: Any = None):
        super().__init__(f"missing required key(s): {', '.join(missing)}", path=path, partial=partial)
        self.missing = tuple(missing)


__all__ = [
    "ParseError",
    "FileMissingError",
    "EmptyFileError",
    "MalformedValueError",
    "IncompleteFileError",
]
