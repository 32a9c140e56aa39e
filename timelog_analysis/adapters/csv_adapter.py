"""CSV adapter for raw time log records."""

from __future__ import annotations

import csv

from timelog_analysis.errors import LoadError
from timelog_analysis.logging_setup import get_logger
from timelog_analysis.schema import RawRecord

logger = get_logger(__name__)

DATE_COLUMN = "Date"
CLOCK_IN_COLUMN = "Clock In Time"
CLOCK_OUT_COLUMN = "Clock Out Time"
NOTES_COLUMN = "Notes"

_REQUIRED_FIELDS = {DATE_COLUMN, CLOCK_IN_COLUMN, CLOCK_OUT_COLUMN, NOTES_COLUMN}


def _cell(row: dict, column: str) -> str | None:
    value = row.get(column)
    if value is None:
        return None
    return value.strip()


def _check_header(fieldnames: list[str] | None, file_path: str) -> None:
    if not fieldnames:
        raise LoadError(f"{file_path}: missing header row", path=file_path)

    header = [name.strip() for name in fieldnames]
    missing = sorted(_REQUIRED_FIELDS - set(header))
    unexpected = sorted(set(header) - _REQUIRED_FIELDS)
    if missing or unexpected or len(header) != len(_REQUIRED_FIELDS):
        raise LoadError(
            f"{file_path}: header {header} does not match expected columns "
            f"(missing {missing}, unexpected {unexpected})",
            path=file_path,
        )


def _parse_row(row: dict, row_number: int, file_path: str) -> RawRecord:
    if any(extra.strip() for extra in row.get(None) or []):
        raise LoadError(f"Row {row_number}: more fields than header columns", path=file_path)

    return RawRecord(
        date_text=_cell(row, DATE_COLUMN) or "",
        clock_in_text=_cell(row, CLOCK_IN_COLUMN) or "",
        clock_out_text=_cell(row, CLOCK_OUT_COLUMN) or "",
        notes_text=_cell(row, NOTES_COLUMN),
    )


def parse(file_path: str, delimiter: str = ",") -> list[RawRecord]:
    """Parse a time log CSV into raw records, preserving file order."""

    try:
        with open(file_path, newline="", encoding="utf-8-sig") as handle:
            reader = csv.DictReader(handle, delimiter=delimiter)
            _check_header(reader.fieldnames, file_path)
            reader.fieldnames = [name.strip() for name in reader.fieldnames]

            records: list[RawRecord] = []
            for row_number, row in enumerate(reader, start=2):
                record = _parse_row(row, row_number, file_path)
                if any((record.date_text, record.clock_in_text, record.clock_out_text, record.notes_text)):
                    records.append(record)
    except OSError as exc:
        raise LoadError(f"{file_path}: cannot read file ({exc})", path=file_path) from exc
    except (UnicodeDecodeError, csv.Error) as exc:
        raise LoadError(f"{file_path}: malformed CSV ({exc})", path=file_path) from exc

    logger.info("Loaded %d records from %s", len(records), file_path)
    return records
