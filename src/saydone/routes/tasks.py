"""Task parsing and task list endpoints."""

from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException

from ..config import settings
from ..database import init_db, load_tasks, save_tasks
from ..models.task import (
    HistoryResponse,
    TaskListResponse,
    TaskParseRequest,
    TaskParseResponse,
    TaskRecord,
    TaskUpdateRequest,
    parse_due_date,
)
from ..services.task_parser import parse_tasks
from ..services.task_store import TaskStore

router = APIRouter(tags=["tasks"])


@lru_cache(maxsize=1)
def get_store() -> TaskStore:
    """Task store backed by the configured SQLite database."""
    init_db()
    return TaskStore(load_tasks(), history_limit=settings.history_limit, on_change=save_tasks)


def _list_response(store: TaskStore) -> TaskListResponse:
    return TaskListResponse(tasks=store.tasks, can_undo=store.can_undo, can_redo=store.can_redo)


@router.post("/parse", response_model=TaskParseResponse)
async def parse_task(request: TaskParseRequest) -> TaskParseResponse:
    """
    Parse natural language input into task records without storing them.

    Each clause of the input becomes one task with:
    - Description
    - Due date (DD-MMM or "Not specified")
    - Category (Work or Home)
    - Urgency (Low, Medium or High)

    Example input: "call mom tonight, also email the client by friday"
    """
    tasks = parse_tasks(request.text, now=request.now)
    return TaskParseResponse(tasks=tasks, count=len(tasks), raw_input=request.text)


@router.post("/capture", response_model=TaskParseResponse)
async def capture_task(
    request: TaskParseRequest,
    store: TaskStore = Depends(get_store),
) -> TaskParseResponse:
    """
    Parse and store tasks in one step.

    Extracted tasks are added to the front of the list.
    """
    tasks = parse_tasks(request.text, now=request.now)
    store.add(tasks)
    return TaskParseResponse(tasks=tasks, count=len(tasks), raw_input=request.text)


@router.get("", response_model=TaskListResponse)
async def list_tasks(store: TaskStore = Depends(get_store)) -> TaskListResponse:
    """Return the current task list, newest first."""
    return _list_response(store)


@router.post("/undo", response_model=HistoryResponse)
async def undo(store: TaskStore = Depends(get_store)) -> HistoryResponse:
    """Revert the last change to the task list."""
    success = store.undo()
    message = "Undid last change" if success else "Nothing to undo"
    return HistoryResponse(success=success, message=message, tasks=store.tasks)


@router.post("/redo", response_model=HistoryResponse)
async def redo(store: TaskStore = Depends(get_store)) -> HistoryResponse:
    """Re-apply the last undone change."""
    success = store.redo()
    message = "Redid last change" if success else "Nothing to redo"
    return HistoryResponse(success=success, message=message, tasks=store.tasks)


@router.patch("/{task_id}", response_model=TaskRecord)
async def edit_task(
    task_id: str,
    request: TaskUpdateRequest,
    store: TaskStore = Depends(get_store),
) -> TaskRecord:
    """Edit description, due date, category or urgency of a task."""
    updates = request.model_dump(exclude_unset=True)
    try:
        if "due_date" in updates:
            updates["due_date"] = parse_due_date(updates["due_date"] or "")
        return store.edit(task_id, **updates)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/{task_id}/toggle", response_model=TaskRecord)
async def toggle_task(task_id: str, store: TaskStore = Depends(get_store)) -> TaskRecord:
    """Mark a task complete, or incomplete again."""
    return store.toggle_complete(task_id)


@router.delete("/{task_id}", response_model=TaskRecord)
async def remove_task(task_id: str, store: TaskStore = Depends(get_store)) -> TaskRecord:
    """Remove a task from the list."""
    return store.remove(task_id)
