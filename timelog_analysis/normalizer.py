"""Turn raw CSV text into typed day records."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

from timelog_analysis.categories import DEFAULT_CATEGORY
from timelog_analysis.errors import DateParseError, TimeParseError
from timelog_analysis.logging_setup import get_logger
from timelog_analysis.schema import DayRecord, RawRecord

logger = get_logger(__name__)

TOKEN_SEPARATOR = ",_"

# Day-month-year only; four digit years are tried before two digit ones.
_DATE_FORMATS = (
    "%d/%m/%Y",
    "%d-%m-%Y",
    "%d.%m.%Y",
    "%d/%m/%y",
    "%d-%m-%y",
    "%d.%m.%y",
)
_TIME_FORMATS = ("%H:%M", "%H:%M:%S")
_UNDERSCORED = str.maketrans({" ": "_", ":": "_", "-": "_"})


def parse_date(text: Optional[str], position: int) -> date:
    """Parse a day/month/year date or raise ``DateParseError``."""

    value = (text or "").strip()
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    raise DateParseError(text, position)


def parse_time(text: Optional[str], position: int, field: str) -> Optional[time]:
    """Parse a 24-hour ``HH:MM`` time; empty text means no time was recorded."""

    value = (text or "").strip()
    if not value:
        return None
    for fmt in _TIME_FORMATS:
        try:
            return datetime.strptime(value, fmt).time()
        except ValueError:
            continue
    raise TimeParseError(text, position, field)


def canonicalize_notes(text: Optional[str]) -> tuple[str, ...]:
    """Split free-text notes into underscore-joined event tokens.

    ``"16:00 lecture, Post-Work Commitment"`` becomes
    ``("16_00_lecture", "Post_Work_Commitment")``. Missing or blank notes
    mean an ordinary working day.
    """

    canonical = (text or "").strip().translate(_UNDERSCORED)
    if not canonical:
        return (DEFAULT_CATEGORY.value,)
    return tuple(canonical.split(TOKEN_SEPARATOR))


def normalize_record(raw: RawRecord, position: int) -> DayRecord:
    return DayRecord(
        id=position,
        date=parse_date(raw.date_text, position),
        clock_in=parse_time(raw.clock_in_text, position, "clock_in"),
        clock_out=parse_time(raw.clock_out_text, position, "clock_out"),
        event_tokens=canonicalize_notes(raw.notes_text),
    )


def normalize(raw_records: list[RawRecord]) -> list[DayRecord]:
    """Normalize every record; the first malformed field aborts the batch."""

    days = [normalize_record(raw, position) for position, raw in enumerate(raw_records, start=1)]
    logger.info("Normalized %d day records", len(days))
    return days
