"""Text rendering of the workout log and its summary."""

import logging
from typing import List

from tabulate import tabulate

from treino_core.constants import TABLE_HEADER, MSG_EMPTY_SUMMARY
from treino_core.export import format_number
from treino_core.metrics import format_decimal
from treino_core.models import WorkoutRecord, WorkoutSummary

logger = logging.getLogger(__name__)

TABLE_FORMAT = "simple"


def entry_to_table_row(entry: WorkoutRecord) -> List[str]:
    return [
        entry.date,
        entry.start,
        entry.end,
        entry.exercise,
        format_number(entry.sets),
        format_number(entry.reps),
        format_number(entry.weight),
        entry.volume,
        format_number(entry.rest) if entry.rest != "" else "",
        entry.duration or "",
        format_number(entry.rpe) if entry.rpe != "" else "",
        entry.notes or "",
    ]


def render_entries_table(entries: List[WorkoutRecord], table_format: str = TABLE_FORMAT) -> str:
    """Render the records as a table, one row per record, header always shown."""
    rows = [entry_to_table_row(entry) for entry in entries]
    # disable_numparse keeps values such as "1500.00" exactly as stored
    return tabulate(rows, headers=TABLE_HEADER, tablefmt=table_format, disable_numparse=True)


def render_summary(summary: WorkoutSummary, table_format: str = TABLE_FORMAT) -> str:
    """
    Render the summary as two titled tables.

    An empty summary renders as a single message line.
    """
    if summary.is_empty:
        return MSG_EMPTY_SUMMARY

    volume_rows = [[date, format_decimal(total)] for date, total in summary.volume_by_date.items()]
    progress_rows = [
        [p.exercise, format_decimal(p.max), format_decimal(p.last)]
        for p in summary.progress.values()
    ]

    lines = [
        "Volume por data",
        tabulate(volume_rows, headers=["Data", "Volume total"], tablefmt=table_format,
                 disable_numparse=True),
        "",
        "Progresso por exercício",
        tabulate(progress_rows, headers=["Exercício", "Carga máxima", "Última carga"],
                 tablefmt=table_format, disable_numparse=True),
    ]
    return "\n".join(lines)
