"""pandas views of pipeline results for plotting and report exports."""

from __future__ import annotations

import pandas as pd

from timelog_analysis.categories import CATEGORIES, indicator_column
from timelog_analysis.events import long_events
from timelog_analysis.schema import TidyDayRecord
from timelog_analysis.summary import DaySummary

BASE_COLUMNS = ["id", "date", "clock_in", "clock_out"]
SUMMARY_COLUMNS = ["group", "measure", "count", "min", "max", "median", "mode", "mean"]


def tidy_frame(tidy: list[TidyDayRecord]) -> pd.DataFrame:
    """One row per day; every ``event_*`` column is a non-null bool."""

    event_columns = [indicator_column(category) for category in CATEGORIES]
    rows = [
        {
            "id": day.id,
            "date": day.date,
            "clock_in": day.clock_in,
            "clock_out": day.clock_out,
            **{indicator_column(category): day.events[category] for category in CATEGORIES},
        }
        for day in tidy
    ]
    df = pd.DataFrame(rows, columns=BASE_COLUMNS + event_columns)
    df["id"] = df["id"].astype("int64")
    df[event_columns] = df[event_columns].astype(bool)
    return df


def long_frame(tidy: list[TidyDayRecord]) -> pd.DataFrame:
    """One row per (day, event) pair, keyed by ``event_type``."""

    rows = [
        {
            "id": event.id,
            "date": event.date,
            "clock_in": event.clock_in,
            "clock_out": event.clock_out,
            "event_type": event.event_type,
        }
        for event in long_events(tidy)
    ]
    return pd.DataFrame(rows, columns=BASE_COLUMNS + ["event_type"])


def summary_frame(grouped: dict[str, DaySummary]) -> pd.DataFrame:
    """Flatten grouped summaries to one row per (group, measure)."""

    rows = []
    for group, summary in grouped.items():
        for measure, stats in summary.to_dict().items():
            rows.append({"group": group, "measure": measure, **stats})
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
