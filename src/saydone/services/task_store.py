"""In-memory task list with undo/redo over whole-list snapshots."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Iterable

from ..models.task import TaskRecord

logger = logging.getLogger(__name__)

Snapshot = tuple[TaskRecord, ...]

EDITABLE_FIELDS = {"description", "due_date", "category", "urgency", "completed"}


class TaskNotFoundError(KeyError):
    """Raised when a task id is not in the current list."""


class TaskStore:
    """Task list whose every mutation can be undone and redone.

    New tasks go to the front of the list. Each mutation pushes the previous
    list onto the undo stack and clears the redo stack.
    """

    def __init__(
        self,
        tasks: Iterable[TaskRecord] = (),
        history_limit: int = 50,
        on_change: Callable[[list[TaskRecord]], None] | None = None,
    ):
        self._past: list[Snapshot] = []
        self._present: Snapshot = tuple(tasks)
        self._future: list[Snapshot] = []
        self.history_limit = history_limit
        self._on_change = on_change

    @property
    def tasks(self) -> list[TaskRecord]:
        return list(self._present)

    @property
    def can_undo(self) -> bool:
        return bool(self._past)

    @property
    def can_redo(self) -> bool:
        return bool(self._future)

    def get(self, task_id: str) -> TaskRecord:
        """Look up a task by id."""
        for task in self._present:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)

    def _commit(self, new_present: Snapshot) -> None:
        self._past.append(self._present)
        if len(self._past) > self.history_limit:
            self._past.pop(0)
        self._present = new_present
        self._future.clear()
        self._changed()

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change(self.tasks)

    def add(self, tasks: TaskRecord | Iterable[TaskRecord]) -> list[TaskRecord]:
        """Insert one or more tasks at the front of the list."""
        new_tasks = (tasks,) if isinstance(tasks, TaskRecord) else tuple(tasks)
        if not new_tasks:
            return []
        self._commit(new_tasks + self._present)
        logger.info(f"Added {len(new_tasks)} task(s)")
        return list(new_tasks)

    def remove(self, task_id: str) -> TaskRecord:
        """Remove a task and return it."""
        task = self.get(task_id)
        self._commit(tuple(t for t in self._present if t.id != task_id))
        logger.info(f"Removed task {task_id}")
        return task

    def _replace(self, task_id: str, updated: TaskRecord) -> TaskRecord:
        self._commit(tuple(updated if t.id == task_id else t for t in self._present))
        return updated

    def toggle_complete(self, task_id: str) -> TaskRecord:
        """Flip a task's completed flag, stamping when it was completed."""
        task = self.get(task_id)
        completed = not task.completed
        updated = task.model_copy(
            update={
                "completed": completed,
                "completed_at": datetime.now() if completed else None,
            }
        )
        logger.info(f"Task {task_id} marked {'complete' if completed else 'incomplete'}")
        return self._replace(task_id, updated)

    def edit(self, task_id: str, **updates: Any) -> TaskRecord:
        """Change editable fields of a task."""
        unknown = set(updates) - EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be edited: {sorted(unknown)}")
        if "description" in updates and not str(updates["description"]).strip():
            raise ValueError("Description cannot be empty")

        task = self.get(task_id)
        updated = TaskRecord.model_validate({**task.model_dump(exclude={"due_date_display"}), **updates})
        logger.info(f"Edited task {task_id}: {sorted(updates)}")
        return self._replace(task_id, updated)

    def undo(self) -> bool:
        """Restore the previous list. Returns False when there is nothing to undo."""
        if not self._past:
            return False
        self._future.insert(0, self._present)
        self._present = self._past.pop()
        self._changed()
        return True

    def redo(self) -> bool:
        """Re-apply the last undone change. Returns False when there is nothing to redo."""
        if not self._future:
            return False
        self._past.append(self._present)
        self._present = self._future.pop(0)
        self._changed()
        return True
