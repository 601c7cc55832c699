"""Data models for Treino Core."""

from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any, Optional, Union, ClassVar, Tuple
import datetime

from pydantic import BaseModel, Field, validator

from treino_core.constants import DATE_FORMAT
from treino_core.metrics import (
    calculate_volume, calculate_duration, format_decimal, normalize_date,
    normalize_time, parse_float, parse_int
)

# Optional numeric fields hold "" when the user left them blank
OptionalInt = Union[int, str]


def _optional_int(value: Any) -> OptionalInt:
    parsed = parse_int(value)
    return "" if parsed is None else parsed


@dataclass(frozen=True)
class WorkoutRecord:
    """A single logged exercise within a training session."""
    date: str
    start: str
    end: str
    exercise: str
    sets: int
    reps: int
    weight: float
    volume: str = "0.00"
    rest: OptionalInt = ""
    duration: str = ""
    rpe: OptionalInt = ""
    notes: str = ""

    @property
    def sort_key(self) -> tuple:
        """Chronological key used to order the log (date, then start time)."""
        return (self.date, self.start)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WorkoutRecord':
        """Create a WorkoutRecord from a persisted or imported dictionary."""
        return cls(
            date=str(data.get('date', '') or ''),
            start=str(data.get('start', '') or ''),
            end=str(data.get('end', '') or ''),
            exercise=str(data.get('exercise', '') or ''),
            sets=parse_int(data.get('sets')) or 0,
            reps=parse_int(data.get('reps')) or 0,
            weight=parse_float(data.get('weight')) or 0.0,
            volume=str(data.get('volume', '') or '0.00'),
            rest=_optional_int(data.get('rest')),
            duration=str(data.get('duration', '') or ''),
            rpe=_optional_int(data.get('rpe')),
            notes=str(data.get('notes', '') or ''),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the dictionary shape that is persisted."""
        return asdict(self)


@dataclass
class ExerciseProgress:
    """Load progression of one exercise."""
    exercise: str
    max: float
    last: float
    last_date: str


@dataclass
class WorkoutSummary:
    """Aggregated view over the whole log."""
    volume_by_date: Dict[str, float] = field(default_factory=dict)
    progress: Dict[str, ExerciseProgress] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.volume_by_date and not self.progress


# Pydantic models for input validation

class WorkoutForm(BaseModel):
    """Pydantic model for a workout form submission."""
    date: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    exercise: Optional[str] = None
    sets: Optional[str] = None
    reps: Optional[str] = None
    weight: Optional[str] = None
    rest: Optional[str] = None
    rpe: Optional[str] = None
    notes: Optional[str] = Field(default="")

    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ("date", "start", "end", "exercise", "sets", "reps", "weight")
    NUMERIC_FIELDS: ClassVar[Tuple[str, ...]] = ("sets", "reps", "weight")

    @validator('*', pre=True)
    def normalize_blank(cls, v: Any) -> Optional[str]:
        """Trim text and turn blank values into None."""
        if v is None:
            return None
        if isinstance(v, datetime.date):
            v = v.strftime(DATE_FORMAT)
        v = str(v).strip()
        return v or None

    def missing_fields(self) -> List[str]:
        """
        Names of required fields that are absent.

        Numeric fields without a leading number count as absent, as a number
        input reports an empty value for anything it cannot parse.
        """
        missing = [name for name in self.REQUIRED_FIELDS if getattr(self, name) is None]
        for name in self.NUMERIC_FIELDS:
            if name not in missing and parse_float(getattr(self, name)) is None:
                missing.append(name)
        return missing

    def to_record(self) -> WorkoutRecord:
        """
        Build the record, deriving volume and duration from the raw fields.

        Date and times are stored zero-padded so that the log sorts correctly
        as text.

        Raises:
            ValueError: If the date or a time is malformed
        """
        volume = calculate_volume(self.sets, self.reps, self.weight)
        return WorkoutRecord(
            date=normalize_date(self.date or ""),
            start=normalize_time(self.start or ""),
            end=normalize_time(self.end or ""),
            exercise=self.exercise or "",
            sets=parse_int(self.sets) or 0,
            reps=parse_int(self.reps) or 0,
            weight=parse_float(self.weight) or 0.0,
            volume=format_decimal(volume),
            rest=_optional_int(self.rest),
            duration=calculate_duration(self.start, self.end),
            rpe=_optional_int(self.rpe),
            notes=self.notes or "",
        )
