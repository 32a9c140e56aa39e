"""Core data schema for time log records."""

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from timelog_analysis.categories import EventCategory


@dataclass(frozen=True)
class RawRecord:
    """One CSV line, every field kept as text."""

    date_text: str
    clock_in_text: str
    clock_out_text: str
    notes_text: Optional[str]


@dataclass(frozen=True)
class DayRecord:
    """Normalized record for a single calendar day."""

    id: int
    date: date
    clock_in: Optional[time]
    clock_out: Optional[time]
    event_tokens: tuple[str, ...]


@dataclass(frozen=True)
class ExplodedRow:
    id: int
    event_token: str
    flags: tuple[bool, ...]


@dataclass(frozen=True)
class TidyDayRecord:
    """One row per day with a boolean indicator for every event category."""

    id: int
    date: date
    clock_in: Optional[time]
    clock_out: Optional[time]
    events: dict[EventCategory, bool]


@dataclass(frozen=True)
class EventDay:
    """Long-form row: one per (day, event that occurred on that day)."""

    id: int
    date: date
    clock_in: Optional[time]
    clock_out: Optional[time]
    event_type: str
