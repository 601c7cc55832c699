"""
CSV export and import of the workout log.
"""

import csv
import logging
import datetime
from io import StringIO
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from treino_core.constants import (
    CSV_HEADER, DATE_FORMAT, EXPORT_FILENAME_PREFIX, EXPORT_FILENAME_EXTENSION
)
from treino_core.models import WorkoutRecord

logger = logging.getLogger(__name__)

# Record attribute behind each CSV column, in header order
CSV_FIELDS = [
    "date", "start", "end", "exercise", "sets", "reps",
    "weight", "volume", "rest", "duration", "rpe", "notes",
]


class CsvFormatError(ValueError):
    """Raised when an imported CSV file is not a workout export."""


def format_number(value: Any) -> str:
    """Write whole floats without a trailing .0 ("100.0" -> "100")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def entry_to_csv_row(entry: WorkoutRecord) -> List[str]:
    """Convert a record to the 12 values of a CSV row."""
    return [
        entry.date,
        entry.start,
        entry.end,
        entry.exercise,
        format_number(entry.sets),
        format_number(entry.reps),
        format_number(entry.weight),
        entry.volume,
        format_number(entry.rest),
        entry.duration,
        format_number(entry.rpe),
        entry.notes.replace("\r\n", " ").replace("\n", " ") if entry.notes else "",
    ]


def generate_csv(entries: List[WorkoutRecord]) -> str:
    """
    Generate CSV text for a list of records.

    Args:
        entries: Records in the order they should appear

    Returns:
        Header plus one line per record, newline-delimited, no trailing newline
    """
    buffer = StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for entry in entries:
        writer.writerow(entry_to_csv_row(entry))
    return buffer.getvalue().rstrip("\n")


def export_filename(today: Optional[datetime.date] = None) -> str:
    """Name of the export file for a given day (treinos_YYYY-MM-DD.csv)."""
    today = today or datetime.date.today()
    return f"{EXPORT_FILENAME_PREFIX}{today.strftime(DATE_FORMAT)}{EXPORT_FILENAME_EXTENSION}"


def export_csv(entries: List[WorkoutRecord], directory: Union[str, Path],
               today: Optional[datetime.date] = None) -> str:
    """
    Export records to a CSV file.

    Args:
        entries: Records to export
        directory: Directory where the file is created
        today: Date used in the file name (defaults to today)

    Returns:
        Path to the created CSV file
    """
    csv_path = Path(directory) / export_filename(today)
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    with open(csv_path, "w", newline="", encoding="utf-8") as f:
        f.write(generate_csv(entries))

    logger.info(f"Exported {len(entries)} entries to CSV: {csv_path}")
    return str(csv_path)


def parse_csv(text: str) -> List[WorkoutRecord]:
    """
    Read records back from exported CSV text.

    Raises:
        CsvFormatError: If the header is not the export header or a row does
            not have one value per column
    """
    reader = csv.reader(StringIO(text))
    header = next(reader, None)
    if header is None:
        raise CsvFormatError("Empty CSV file")
    if [h.strip() for h in header] != CSV_HEADER:
        raise CsvFormatError(f"Unexpected CSV header: {header}")

    entries = []
    for line_no, row in enumerate(reader, start=2):
        if not row:
            continue
        if len(row) != len(CSV_FIELDS):
            raise CsvFormatError(f"Line {line_no}: expected {len(CSV_FIELDS)} values, got {len(row)}")
        data: Dict[str, str] = dict(zip(CSV_FIELDS, row))
        entries.append(WorkoutRecord.from_dict(data))

    logger.debug(f"Parsed {len(entries)} entries from CSV")
    return entries


def import_csv(csv_path: Union[str, Path]) -> List[WorkoutRecord]:
    """Read records from an exported CSV file."""
    with open(csv_path, "r", newline="", encoding="utf-8") as f:
        return parse_csv(f.read())
