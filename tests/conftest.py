"""Shared fixtures for the Treino Core tests."""

import pytest

from treino_core.models import WorkoutRecord
from treino_core.storage import MemoryBlobStore, WorkoutRepository


def make_record(date="2024-05-01", start="08:00", exercise="Supino", weight=60.0,
                sets=3, reps=10, volume=None, **extra):
    """Build a record with sensible defaults; volume follows sets x reps x weight."""
    if volume is None:
        volume = f"{sets * reps * weight:.2f}"
    fields = dict(date=date, start=start, end=extra.pop("end", "09:00"), exercise=exercise,
                  sets=sets, reps=reps, weight=weight, volume=volume)
    fields.update(extra)
    return WorkoutRecord(**fields)


@pytest.fixture
def store():
    """An empty in-memory blob store."""
    return MemoryBlobStore()


@pytest.fixture
def repository(store):
    """A repository over the in-memory store."""
    return WorkoutRepository(store)


@pytest.fixture
def sample_entries():
    """Three records, most recent first, as the repository keeps them."""
    return [
        make_record("2024-05-03", "08:00", "Supino", 70.0),
        make_record("2024-05-01", "09:00", "Supino", 80.0),
        make_record("2024-05-01", "08:00", "Agachamento", 100.0),
    ]
