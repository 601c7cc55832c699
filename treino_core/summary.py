"""
Summary module for the workout log.

Aggregates the log into total volume per date and load progression per
exercise.
"""

import logging
from typing import Dict, Iterable

from treino_core.models import WorkoutRecord, WorkoutSummary, ExerciseProgress
from treino_core.metrics import parse_float

logger = logging.getLogger(__name__)


def summarize(entries: Iterable[WorkoutRecord]) -> WorkoutSummary:
    """
    Build the summary of a log.

    Entries are expected most recent first, as the repository stores them.
    The first record seen for an exercise sets its last load; a later record
    only replaces it when its date is the same or newer.

    Args:
        entries: Workout records

    Returns:
        WorkoutSummary with dates in chronological order and exercises in
        the order they were first seen
    """
    volume_by_date: Dict[str, float] = {}
    progress: Dict[str, ExerciseProgress] = {}

    for entry in entries:
        volume = parse_float(entry.volume) or 0.0
        volume_by_date[entry.date] = volume_by_date.get(entry.date, 0.0) + volume

        weight = entry.weight
        current = progress.get(entry.exercise)
        if current is None:
            progress[entry.exercise] = ExerciseProgress(
                exercise=entry.exercise,
                max=weight,
                last=weight,
                last_date=entry.date,
            )
            continue
        if weight > current.max:
            current.max = weight
        if entry.date >= current.last_date:
            current.last = weight
            current.last_date = entry.date

    logger.debug(f"Summarized {len(volume_by_date)} dates and {len(progress)} exercises")
    return WorkoutSummary(
        volume_by_date={date: volume_by_date[date] for date in sorted(volume_by_date)},
        progress=progress,
    )
