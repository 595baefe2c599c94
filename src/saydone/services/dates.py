"""Rule-based due date resolution for task clauses."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Callable

from ..models.task import first_valid_date, format_due_date, parse_due_date
from .matching import strip_pattern

logger = logging.getLogger(__name__)

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

MONTH_KEYS = ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec")

_MONTH = (
    r"(jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?"
    r"|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)"
)
_ORDINAL = r"(?:st|nd|rd|th)?"

Resolver = Callable[[re.Match, date], "date | None"]


@dataclass(frozen=True)
class DateResult:
    """Outcome of date resolution for one clause."""

    due_date: date | None
    text: str
    rule: str | None = None
    deferred: bool = False  # A seasonal reference matched but names no date


class DateRule:
    """A temporal pattern and how to turn a match into a date."""

    def __init__(self, name: str, pattern: str, resolve: Resolver, deferred: bool = False):
        self.name = name
        self.pattern = re.compile(pattern, re.IGNORECASE)
        self.resolve = resolve
        self.deferred = deferred

    def search(self, text: str) -> re.Match | None:
        return self.pattern.search(text)


def _today(match: re.Match, today: date) -> date:
    return today


def _tomorrow(match: re.Match, today: date) -> date:
    return today + timedelta(days=1)


def _in_days(match: re.Match, today: date) -> date:
    return today + timedelta(days=int(match.group(1)))


def _weekend(match: re.Match, today: date) -> date:
    # Saturday and Sunday count as "already on the weekend"
    if today.weekday() >= 5:
        return today + timedelta(days=2)
    return today + timedelta(days=5 - today.weekday())


def _this_month(match: re.Match, today: date) -> date:
    mid_month = today.replace(day=15)
    if mid_month < today:
        # Capped at the 28th on purpose: from the 29th on this lands before today
        return today.replace(day=min(28, today.day + 5))
    return mid_month


def _next_week(match: re.Match, today: date) -> date:
    return today + timedelta(days=7)


def _unresolved(match: re.Match, today: date) -> None:
    return None


def _weekday(match: re.Match, today: date) -> date:
    days_to_add = WEEKDAYS.index(match.group(1).lower()) - today.weekday()
    if days_to_add <= 0:
        days_to_add += 7
    return today + timedelta(days=days_to_add)


def _calendar_date(day: int, month_name: str, today: date) -> date | None:
    month = MONTH_KEYS.index(month_name[:3].lower()) + 1
    try:
        candidate = first_valid_date(today.year, month, day)
        if candidate < today:
            candidate = first_valid_date(today.year + 1, month, day)
    except ValueError:
        logger.warning(f"Ignoring impossible date: day {day} of {month_name}")
        return None
    return candidate


def _day_month(match: re.Match, today: date) -> date | None:
    return _calendar_date(int(match.group(1)), match.group(2), today)


def _month_day(match: re.Match, today: date) -> date | None:
    return _calendar_date(int(match.group(2)), match.group(1), today)


# --- Date Rules (first match wins) ---

DATE_RULES: list[DateRule] = [
    DateRule("end_of_day", r"\b(?:by\s+)?(?:eod|end\s+of\s+(?:the\s+)?day)\b", _today),
    DateRule("in_days", r"\bin\s+(?:the\s+)?(?:next\s+)?(\d{1,4})\s+days?\b", _in_days),
    DateRule("weekend", r"\b(?:this\s+)?weekend\b", _weekend),
    DateRule("this_month", r"\b(?:sometime\s+)?this\s+month\b", _this_month),
    DateRule("next_week", r"\bnext\s+week\b", _next_week),
    # Seasonal plans have no date we can commit to
    DateRule(
        "seasonal",
        r"\b(?:summer\s+)?(?:holiday|vacation|travel)\b",
        _unresolved,
        deferred=True,
    ),
    DateRule("today", r"\b(?:today|tonight)\b", _today),
    DateRule("tomorrow", r"\btomorrow\b", _tomorrow),
    DateRule("weekday", r"\b(?:(?:on|next|by)\s+)?(" + "|".join(WEEKDAYS) + r")\b", _weekday),
    DateRule("day_month", r"\b(\d{1,2})" + _ORDINAL + r"\s+" + _MONTH + r"\b", _day_month),
    DateRule("month_day", r"\b" + _MONTH + r"\s+(\d{1,2})" + _ORDINAL + r"\b", _month_day),
]


def _as_date(now: datetime | date) -> date:
    if isinstance(now, datetime):
        return now.date()
    return now


def resolve_date(clause: str, now: datetime | date) -> DateResult:
    """
    Resolve the due date mentioned in a clause.

    Args:
        clause: Clause text after priority stripping
        now: Reference moment that relative expressions are measured from

    Returns:
        DateResult with the date (None when unspecified) and the clause
        with the matched date expression removed
    """
    today = _as_date(now)

    for rule in DATE_RULES:
        match = rule.search(clause)
        if match is None:
            continue

        due = rule.resolve(match, today)
        logger.debug(f"Date rule '{rule.name}' matched '{match.group(0)}' -> {format_due_date(due)}")
        return DateResult(
            due_date=due,
            text=strip_pattern(rule.pattern, clause),
            rule=rule.name,
            deferred=rule.deferred,
        )

    return DateResult(due_date=None, text=clause)


__all__ = [
    "DATE_RULES",
    "DateResult",
    "DateRule",
    "format_due_date",
    "parse_due_date",
    "resolve_date",
]
