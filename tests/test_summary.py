#!/usr/bin/env python3
"""
Tests for summary module.
"""

from treino_core.summary import summarize

from conftest import make_record


def test_summarize_empty():
    """Test an empty log gives an empty summary."""
    summary = summarize([])
    assert summary.is_empty
    assert summary.volume_by_date == {}
    assert summary.progress == {}


def test_volume_by_date(sample_entries):
    """Test volume is summed per date and dates come out chronologically."""
    summary = summarize(sample_entries)
    assert list(summary.volume_by_date) == ["2024-05-01", "2024-05-03"]
    assert summary.volume_by_date["2024-05-01"] == 2400.0 + 3000.0
    assert summary.volume_by_date["2024-05-03"] == 2100.0


def test_progress_by_exercise(sample_entries):
    """Test max and most recent load per exercise."""
    summary = summarize(sample_entries)
    assert list(summary.progress) == ["Supino", "Agachamento"]

    bench = summary.progress["Supino"]
    assert bench.max == 80.0
    assert bench.last == 70.0
    assert bench.last_date == "2024-05-03"

    squat = summary.progress["Agachamento"]
    assert squat.max == 100.0
    assert squat.last == 100.0


def test_last_load_same_date():
    """Test a later record on the same date replaces the last load."""
    entries = [
        make_record("2024-05-01", "10:00", "Remada", 50.0),
        make_record("2024-05-01", "08:00", "Remada", 40.0),
    ]
    progress = summarize(entries).progress["Remada"]
    assert progress.max == 50.0
    assert progress.last == 40.0


def test_last_load_ignores_older_dates():
    """Test older records do not replace the last load."""
    entries = [
        make_record("2024-06-01", "08:00", "Terra", 110.0),
        make_record("2024-05-01", "08:00", "Terra", 130.0),
    ]
    progress = summarize(entries).progress["Terra"]
    assert progress.last == 110.0
    assert progress.max == 130.0


def test_max_never_decreases():
    """Test the running max only grows as records are added."""
    weights = [60.0, 55.0, 70.0, 65.0, 70.0, 40.0, 90.0]
    entries = []
    previous = None
    for day, weight in enumerate(weights, start=1):
        entries.insert(0, make_record(f"2024-05-{day:02d}", "08:00", "Supino", weight))
        current = summarize(entries).progress["Supino"].max
        if previous is not None:
            assert current >= previous
        previous = current
    assert previous == 90.0


def test_non_numeric_volume_counts_as_zero():
    """Test a corrupt volume value adds nothing."""
    entries = [
        make_record("2024-05-01", "09:00", volume="n/a"),
        make_record("2024-05-01", "08:00", volume="100.00"),
    ]
    assert summarize(entries).volume_by_date["2024-05-01"] == 100.0
