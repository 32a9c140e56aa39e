"""Run the time log report from a CSV file."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from timelog_analysis.categories import EventCategory
from timelog_analysis.config import EVENT_TYPE, PipelineConfig
from timelog_analysis.errors import TimelogError
from timelog_analysis.frames import long_frame, tidy_frame
from timelog_analysis.logging_setup import setup_logger
from timelog_analysis.pipeline import run_pipeline


def _grouping(value: str):
    if value == EVENT_TYPE:
        return EVENT_TYPE
    try:
        return EventCategory(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"expected {EVENT_TYPE!r} or one of {[c.value for c in EventCategory]}"
        ) from exc


def build_parser(config: PipelineConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Summarize clock-in/clock-out times per event")
    parser.add_argument("--data", default=str(config.data_path), help="Path to the time log CSV")
    parser.add_argument("--output-dir", default=str(config.output_dir), help="Directory for report files")
    parser.add_argument("--by", type=_grouping, default=config.group_by, help="event.type or a category label")
    parser.add_argument("--log-level", default=config.log_level)
    parser.add_argument("--log-format", choices=("json", "text"), default=config.log_format)
    return parser


def main(argv: list[str] | None = None) -> int:
    config = PipelineConfig.from_env()
    args = build_parser(config).parse_args(argv)
    logger = setup_logger(level=args.log_level, format_type=args.log_format)

    try:
        result = run_pipeline(args.data, by=args.by)
    except TimelogError as exc:
        logger.error("Report failed: %s", exc)
        return 1

    report = result.to_dict()
    print(json.dumps(report, indent=2))

    outputs_dir = Path(args.output_dir)
    outputs_dir.mkdir(parents=True, exist_ok=True)
    (outputs_dir / "summary.json").write_text(json.dumps(report, indent=2), encoding="utf-8")
    tidy_frame(result.tidy).to_csv(outputs_dir / "tidy_days.csv", index=False)
    long_frame(result.tidy).to_csv(outputs_dir / "event_days.csv", index=False)
    logger.info("Saved report files to %s", outputs_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
