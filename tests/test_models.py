#!/usr/bin/env python3
"""
Tests for models module.
"""

import pytest

from treino_core.models import WorkoutForm, WorkoutRecord, WorkoutSummary

from conftest import make_record


def test_form_to_record():
    """Test a complete form derives volume and duration."""
    form = WorkoutForm(date="2024-05-01", start="08:00", end="09:15", exercise="  Supino reto ",
                       sets="3", reps="10", weight="62.5", rest="90", rpe="8", notes=" pesado ")
    assert form.missing_fields() == []

    record = form.to_record()
    assert record.exercise == "Supino reto"
    assert record.sets == 3
    assert record.reps == 10
    assert record.weight == 62.5
    assert record.volume == "1875.00"
    assert record.duration == "01:15"
    assert record.rest == 90
    assert record.rpe == 8
    assert record.notes == "pesado"


def test_form_optional_fields_blank():
    """Test blank optional fields are stored as empty strings."""
    form = WorkoutForm(date="2024-05-01", start="08:00", end="09:00", exercise="Remada",
                       sets=4, reps=12, weight=40, rest="", rpe=None)
    record = form.to_record()
    assert record.rest == ""
    assert record.rpe == ""
    assert record.notes == ""
    assert record.volume == "1920.00"


def test_form_missing_fields():
    """Test blank and absent required fields are reported."""
    form = WorkoutForm(date="2024-05-01", exercise="   ", sets="3")
    missing = form.missing_fields()
    assert set(missing) == {"start", "end", "exercise", "reps", "weight"}


def test_form_non_numeric_counts_as_missing():
    """Test a required numeric field without a number is reported."""
    form = WorkoutForm(date="2024-05-01", start="08:00", end="09:00", exercise="Supino",
                       sets="three", reps="10", weight="60")
    assert form.missing_fields() == ["sets"]


def test_record_dict_round_trip():
    """Test a record survives to_dict/from_dict."""
    record = make_record(rest=60, rpe="", notes="ok")
    assert WorkoutRecord.from_dict(record.to_dict()) == record


def test_record_from_partial_dict():
    """Test missing keys fall back to defaults."""
    record = WorkoutRecord.from_dict({"date": "2024-01-01", "exercise": "Terra", "weight": "120"})
    assert record.date == "2024-01-01"
    assert record.weight == 120.0
    assert record.sets == 0
    assert record.volume == "0.00"
    assert record.rest == ""
    assert record.notes == ""


def test_record_sort_key():
    """Test records order by date then start time."""
    assert make_record("2024-05-01", "09:00").sort_key > make_record("2024-05-01", "08:00").sort_key
    assert make_record("2024-05-02", "07:00").sort_key > make_record("2024-05-01", "23:00").sort_key


def test_summary_is_empty():
    """Test an empty summary reports itself as such."""
    assert WorkoutSummary().is_empty


def test_form_pads_date_and_times():
    """Test the record stores zero-padded date and times."""
    form = WorkoutForm(date="2024-5-9", start="9:05", end="9:50", exercise="Supino",
                       sets="3", reps="10", weight="60")
    record = form.to_record()
    assert record.date == "2024-05-09"
    assert record.start == "09:05"
    assert record.end == "09:50"
    assert record.duration == "00:45"


def test_form_rejects_invalid_date():
    """Test an impossible date is refused."""
    form = WorkoutForm(date="2024-13-01", start="08:00", end="09:00", exercise="Supino",
                       sets="3", reps="10", weight="60")
    with pytest.raises(ValueError):
        form.to_record()
