"""Pydantic models for task records and request/response schemas."""

from .task import (
    NOT_SPECIFIED,
    Category,
    HistoryResponse,
    TaskListResponse,
    TaskParseRequest,
    TaskParseResponse,
    TaskRecord,
    TaskUpdateRequest,
    Urgency,
    first_valid_date,
    format_due_date,
    parse_due_date,
)

__all__ = [
    "NOT_SPECIFIED",
    "Category",
    "Urgency",
    "TaskRecord",
    "TaskParseRequest",
    "TaskParseResponse",
    "TaskUpdateRequest",
    "TaskListResponse",
    "HistoryResponse",
    "first_valid_date",
    "format_due_date",
    "parse_due_date",
]
