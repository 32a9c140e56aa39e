"""Demo script for timelog-analysis."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from timelog_analysis.frames import tidy_frame
from timelog_analysis.logging_setup import setup_logger
from timelog_analysis.pipeline import run_pipeline


def main() -> None:
    setup_logger()
    result = run_pipeline(str(Path(__file__).with_name("sample_timelog.csv")))
    print(tidy_frame(result.tidy).to_string(index=False))
    print("Overall:", result.overall)
    for group, summary in result.grouped.items():
        print(f"{group}: mean clock-in {summary.clock_in.mean}, mean office hours {summary.office_hours.mean}")


if __name__ == "__main__":
    main()
