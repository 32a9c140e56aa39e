"""Error types raised by the time log pipeline."""

from __future__ import annotations

from typing import Iterable, Optional


class TimelogError(ValueError):
    """Base class for every pipeline failure."""


class LoadError(TimelogError):
    """The input file is missing, unreadable, or has the wrong shape."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class RecordParseError(TimelogError):
    """A field of one input record could not be parsed."""

    def __init__(self, text: Optional[str], position: int, field: str):
        super().__init__(f"Row {position}: malformed {field} {text!r}")
        self.text = text
        self.position = position
        self.field = field


class DateParseError(RecordParseError):
    def __init__(self, text: Optional[str], position: int, field: str = "date"):
        super().__init__(text, position, field)


class TimeParseError(RecordParseError):
    pass


class JoinError(TimelogError):
    """Collapsed indicator rows and day records do not share the same ids."""

    def __init__(self, message: str, ids: Iterable[int] = ()):
        super().__init__(message)
        self.ids = tuple(sorted(ids))
