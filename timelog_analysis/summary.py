"""Descriptive statistics over clock times and office durations."""

from __future__ import annotations

from collections import Counter
from dataclasses import asdict, dataclass
from datetime import datetime, time, timedelta
from typing import Iterable, Optional, Union

import numpy as np

from timelog_analysis.categories import CATEGORIES, EventCategory
from timelog_analysis.config import EVENT_TYPE
from timelog_analysis.schema import TidyDayRecord

OVERALL = "overall"

_SECONDS_PER_HOUR = 3600.0


@dataclass(frozen=True)
class TimeSummary:
    """count/min/max/median/mode/mean of time-of-day values."""

    count: int
    min: Optional[time]
    max: Optional[time]
    median: Optional[time]
    mode: Optional[time]
    mean: Optional[time]

    def to_dict(self) -> dict:
        return {
            key: value.isoformat() if isinstance(value, time) else value
            for key, value in asdict(self).items()
        }


@dataclass(frozen=True)
class DurationSummary:
    """Same statistics as ``TimeSummary`` over durations in hours."""

    count: int
    min: Optional[float]
    max: Optional[float]
    median: Optional[float]
    mode: Optional[float]
    mean: Optional[float]

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class DaySummary:
    clock_in: TimeSummary
    clock_out: TimeSummary
    office_hours: DurationSummary

    def to_dict(self) -> dict:
        return {
            "clock_in": self.clock_in.to_dict(),
            "clock_out": self.clock_out.to_dict(),
            "office_hours": self.office_hours.to_dict(),
        }


def to_seconds(value: time) -> float:
    return value.hour * 3600 + value.minute * 60 + value.second + value.microsecond / 1_000_000


def from_seconds(seconds: float) -> time:
    return (datetime.min + timedelta(seconds=float(seconds))).time()


def _mode(values: list) -> object:
    # most_common keeps first-encountered order among equal counts.
    return Counter(values).most_common(1)[0][0]


def summarize_times(values: Iterable[Optional[time]]) -> TimeSummary:
    """Summarize time-of-day values, ignoring missing entries."""

    present = [value for value in values if value is not None]
    if not present:
        return TimeSummary(count=0, min=None, max=None, median=None, mode=None, mean=None)

    seconds = np.asarray([to_seconds(value) for value in present], dtype=float)
    return TimeSummary(
        count=len(present),
        min=min(present),
        max=max(present),
        median=from_seconds(np.median(seconds)),
        mode=_mode(present),
        mean=from_seconds(np.mean(seconds)),
    )


def summarize_durations(values: Iterable[Optional[float]]) -> DurationSummary:
    present = [float(value) for value in values if value is not None]
    if not present:
        return DurationSummary(count=0, min=None, max=None, median=None, mode=None, mean=None)

    hours = np.asarray(present, dtype=float)
    return DurationSummary(
        count=len(present),
        min=float(hours.min()),
        max=float(hours.max()),
        median=float(np.median(hours)),
        mode=_mode(present),
        mean=float(hours.mean()),
    )


def office_hours(day: TidyDayRecord) -> Optional[float]:
    """Hours between clock-in and clock-out; negative spans are kept as-is."""

    if day.clock_in is None or day.clock_out is None:
        return None
    return (to_seconds(day.clock_out) - to_seconds(day.clock_in)) / _SECONDS_PER_HOUR


def summarize_days(days: list[TidyDayRecord]) -> DaySummary:
    return DaySummary(
        clock_in=summarize_times(day.clock_in for day in days),
        clock_out=summarize_times(day.clock_out for day in days),
        office_hours=summarize_durations(office_hours(day) for day in days),
    )


def _groups(tidy: list[TidyDayRecord], by: Union[str, EventCategory]) -> dict[str, list[TidyDayRecord]]:
    if isinstance(by, EventCategory):
        groups: dict[str, list[TidyDayRecord]] = {}
        for flag in (True, False):
            members = [day for day in tidy if day.events[by] is flag]
            if members:
                groups[f"{by.value}={flag}"] = members
        return groups

    if by != EVENT_TYPE:
        raise ValueError(f"Unsupported grouping key {by!r}; use an EventCategory or {EVENT_TYPE!r}")

    groups = {}
    for category in CATEGORIES:
        members = [day for day in tidy if day.events[category]]
        if members:
            groups[category.value] = members
    return groups


def summarize_grouped(
    tidy: list[TidyDayRecord],
    by: Union[str, EventCategory] = EVENT_TYPE,
) -> dict[str, DaySummary]:
    """Summarize clock times and office hours overall and per group.

    ``by="event.type"`` puts a day in the group of every event it carries;
    an ``EventCategory`` splits days on that single flag.
    """

    result = {OVERALL: summarize_days(tidy)}
    for key, members in _groups(tidy, by).items():
        result[key] = summarize_days(members)
    return result


def summarize_overall(tidy: list[TidyDayRecord]) -> dict:
    """Row count and mean clock-in/clock-out across all days."""

    clock_in = summarize_times(day.clock_in for day in tidy)
    clock_out = summarize_times(day.clock_out for day in tidy)
    return {
        "n": len(tidy),
        "mean_clock_in": clock_in.mean.isoformat() if clock_in.mean is not None else None,
        "mean_clock_out": clock_out.mean.isoformat() if clock_out.mean is not None else None,
    }
