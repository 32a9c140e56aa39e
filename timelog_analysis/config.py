"""Run configuration for the time log report."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

EVENT_TYPE = "event.type"

DEFAULT_DATA_PATH = Path("data") / "data.csv"
DEFAULT_OUTPUT_DIR = Path("outputs")


@dataclass
class PipelineConfig:
    """Where to read the log, where to write reports, and how to log."""

    data_path: Path = DEFAULT_DATA_PATH
    output_dir: Path = DEFAULT_OUTPUT_DIR
    log_level: str = "INFO"
    log_format: str = "text"
    group_by: str = EVENT_TYPE

    @classmethod
    def from_env(cls) -> "PipelineConfig":
        return cls(
            data_path=Path(os.getenv("TIMELOG_DATA", str(DEFAULT_DATA_PATH))),
            output_dir=Path(os.getenv("TIMELOG_OUTPUT_DIR", str(DEFAULT_OUTPUT_DIR))),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("TIMELOG_LOG_FORMAT", "text"),
        )
