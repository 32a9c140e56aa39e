"""Load, normalize, reshape and summarize a time log in one call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from timelog_analysis.adapters import csv_adapter
from timelog_analysis.categories import EventCategory
from timelog_analysis.config import EVENT_TYPE
from timelog_analysis.events import expand_and_collapse
from timelog_analysis.logging_setup import get_logger, log_operation
from timelog_analysis.normalizer import normalize
from timelog_analysis.schema import DayRecord, TidyDayRecord
from timelog_analysis.summary import DaySummary, summarize_grouped, summarize_overall

logger = get_logger(__name__)


@dataclass
class PipelineResult:
    days: list[DayRecord]
    tidy: list[TidyDayRecord]
    grouped: dict[str, DaySummary]
    overall: dict

    def to_dict(self) -> dict:
        return {
            "overall": self.overall,
            "grouped": {key: summary.to_dict() for key, summary in self.grouped.items()},
        }


def run_pipeline(file_path: str, by: Union[str, EventCategory] = EVENT_TYPE) -> PipelineResult:
    """Run every stage on ``file_path``; any stage error aborts the run."""

    with log_operation("timelog pipeline", logger=logger, path=str(file_path)):
        raw = csv_adapter.parse(str(file_path))
        days = normalize(raw)
        tidy = expand_and_collapse(days)
        grouped = summarize_grouped(tidy, by=by)
        overall = summarize_overall(tidy)

    return PipelineResult(days=days, tidy=tidy, grouped=grouped, overall=overall)
