"""Explode day records into per-event rows and collapse them back to days."""

from __future__ import annotations

import warnings
from collections import defaultdict

import numpy as np
from sklearn.preprocessing import MultiLabelBinarizer

from timelog_analysis.categories import CATEGORIES, CATEGORY_VALUES
from timelog_analysis.errors import JoinError
from timelog_analysis.logging_setup import get_logger
from timelog_analysis.schema import DayRecord, EventDay, ExplodedRow, TidyDayRecord

logger = get_logger(__name__)


def _binarizer() -> MultiLabelBinarizer:
    binarizer = MultiLabelBinarizer(classes=list(CATEGORY_VALUES))
    binarizer.fit([list(CATEGORY_VALUES)])
    return binarizer


def explode(days: list[DayRecord]) -> list[ExplodedRow]:
    """Emit one row per (day, token) with a flag per known category.

    Tokens outside the category list produce an all-false row and a warning.
    """

    pairs = [(day.id, token) for day in days for token in day.event_tokens]
    if not pairs:
        return []

    known = set(CATEGORY_VALUES)
    for day_id, token in pairs:
        if token not in known:
            logger.warning("Unknown event token %r on day %d", token, day_id)

    with warnings.catch_warnings():
        # The binarizer warns about unknown labels; they are reported above.
        warnings.simplefilter("ignore", UserWarning)
        matrix = _binarizer().transform([[token] for _, token in pairs])

    return [
        ExplodedRow(id=day_id, event_token=token, flags=tuple(bool(flag) for flag in row))
        for (day_id, token), row in zip(pairs, np.asarray(matrix))
    ]


def collapse(rows: list[ExplodedRow]) -> dict[int, tuple[bool, ...]]:
    """OR-reduce the category flags of each day's exploded rows."""

    by_day: dict[int, list[tuple[bool, ...]]] = defaultdict(list)
    for row in rows:
        by_day[row.id].append(row.flags)

    return {
        day_id: tuple(bool(flag) for flag in np.logical_or.reduce(np.asarray(flags, dtype=bool), axis=0))
        for day_id, flags in by_day.items()
    }


def rejoin(collapsed: dict[int, tuple[bool, ...]], days: list[DayRecord]) -> list[TidyDayRecord]:
    """Attach date and clock times to the collapsed flags by day id."""

    by_id = {day.id: day for day in days}
    missing_days = set(collapsed) - set(by_id)
    missing_flags = set(by_id) - set(collapsed)
    if missing_days or missing_flags:
        raise JoinError(
            f"Day ids do not match: no day record for {sorted(missing_days)}, "
            f"no event flags for {sorted(missing_flags)}",
            ids=missing_days | missing_flags,
        )

    tidy = []
    for day in days:
        flags = collapsed[day.id]
        tidy.append(
            TidyDayRecord(
                id=day.id,
                date=day.date,
                clock_in=day.clock_in,
                clock_out=day.clock_out,
                events=dict(zip(CATEGORIES, flags)),
            )
        )
    return tidy


def expand_and_collapse(days: list[DayRecord]) -> list[TidyDayRecord]:
    """Build the tidy per-day indicator table, in input order."""

    tidy = rejoin(collapse(explode(days)), days)
    logger.info("Collapsed %d day records into %d tidy rows", len(days), len(tidy))
    return tidy


def long_events(tidy: list[TidyDayRecord]) -> list[EventDay]:
    """One row per event that occurred on a day, for per-event plotting."""

    return [
        EventDay(
            id=day.id,
            date=day.date,
            clock_in=day.clock_in,
            clock_out=day.clock_out,
            event_type=category.value,
        )
        for day in tidy
        for category in CATEGORIES
        if day.events[category]
    ]
