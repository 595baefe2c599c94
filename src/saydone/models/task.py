"""Task-related Pydantic models."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field

NOT_SPECIFIED = "Not specified"

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


class Category(str, Enum):
    """Where a task belongs."""

    WORK = "Work"
    HOME = "Home"


class Urgency(str, Enum):
    """Priority tier, ordered Low < Medium < High."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @property
    def rank(self) -> int:
        return _URGENCY_RANK[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Urgency):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Urgency):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Urgency):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Urgency):
            return NotImplemented
        return self.rank >= other.rank


_URGENCY_RANK = {Urgency.LOW: 0, Urgency.MEDIUM: 1, Urgency.HIGH: 2}


def format_due_date(value: date | None) -> str:
    """Render a due date as DD-MMM, or 'Not specified' when unresolved."""
    if value is None:
        return NOT_SPECIFIED
    return f"{value.day:02d}-{MONTH_ABBREVIATIONS[value.month - 1]}"


def first_valid_date(year: int, month: int, day: int) -> date:
    """Return day/month in the first year from 'year' on where it exists.

    Only 29 Feb ever needs to look ahead. Raises ValueError for a day that
    no year has, such as 30 Feb.
    """
    for offset in range(8):
        try:
            return date(year + offset, month, day)
        except ValueError:
            if (month, day) != (2, 29):
                raise
    raise ValueError(f"No valid date for day {day} of month {month}")


def parse_due_date(text: str, today: date | None = None) -> date | None:
    """Parse a DD-MMM string back into a date in the current year.

    29-Feb outside a leap year resolves to the next leap year.

    Raises ValueError for anything that is neither DD-MMM nor 'Not specified'.
    """
    text = text.strip()
    if not text or text.lower() == NOT_SPECIFIED.lower():
        return None

    day_part, sep, month_part = text.partition("-")
    if not sep or not day_part.isdigit():
        raise ValueError(f"Invalid due date: {text!r} (expected DD-MMM)")

    abbreviations = [m.lower() for m in MONTH_ABBREVIATIONS]
    month_key = month_part[:3].lower()
    if month_key not in abbreviations:
        raise ValueError(f"Invalid month in due date: {text!r}")

    year = (today or date.today()).year
    return first_valid_date(year, abbreviations.index(month_key) + 1, int(day_part))


class TaskRecord(BaseModel):
    """A single task extracted from an utterance."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()), description="Opaque unique ID")
    description: str = Field(..., min_length=1, description="Cleaned, capitalised task text")
    due_date: date | None = Field(None, description="Resolved due date (None = not specified)")
    category: Category = Category.HOME
    urgency: Urgency = Urgency.MEDIUM
    completed: bool = False
    completed_at: datetime | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def due_date_display(self) -> str:
        """Due date in DD-MMM form."""
        return format_due_date(self.due_date)


class TaskParseRequest(BaseModel):
    """Request to parse natural language task input."""

    text: str = Field(
        ...,
        description="Raw voice/text input like 'call mom tonight, also email the client by friday'",
        max_length=2000,
    )
    now: datetime | None = Field(
        None,
        description="Reference moment for relative dates (defaults to the server clock)",
    )


class TaskParseResponse(BaseModel):
    """Response with the extracted task records."""

    tasks: list[TaskRecord] = Field(default_factory=list)
    count: int = Field(0, description="Number of tasks extracted")
    raw_input: str = Field(..., description="Original input text")


class TaskUpdateRequest(BaseModel):
    """Fields a user may edit on a stored task."""

    description: str | None = Field(None, min_length=1)
    due_date: str | None = Field(None, description="DD-MMM or 'Not specified'")
    category: Category | None = None
    urgency: Urgency | None = None


class TaskListResponse(BaseModel):
    """Current task list plus history availability."""

    tasks: list[TaskRecord] = Field(default_factory=list)
    can_undo: bool = False
    can_redo: bool = False


class HistoryResponse(BaseModel):
    """Result of an undo or redo request."""

    success: bool
    message: str
    tasks: list[TaskRecord] = Field(default_factory=list)
