"""In-memory task collections.

A manager owns an ordered list of records of one shape. Missing ids are
never an error: removals and status updates on an absent id leave the
collection untouched.
"""
import logging
import threading
from typing import Any, Generic, List, Optional, Protocol, TypeVar

from .models import BaseTask, PriorityLevel, PriorityTask, TaskLike, TaskStatus

logger = logging.getLogger(__name__)


class StoredTask(TaskLike, Protocol):
    """A task record the manager can copy on insertion (any pydantic record model)."""

    def model_copy(self, *, update: Any = None, deep: bool = False) -> Any: ...


TaskT = TypeVar("TaskT", bound=StoredTask)


class TaskManager(Generic[TaskT]):
    """Ordered collection of task records of a single shape."""

    def __init__(self) -> None:
        self._tasks: List[TaskT] = []
        # Held for the whole of every operation; the API serves requests from a threadpool.
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def add_task(self, task: TaskT) -> TaskT:
        """Append a copy of the task; the caller keeps its own object."""
        stored = task.model_copy(deep=True)
        with self._lock:
            if any(existing.id == stored.id for existing in self._tasks):
                logger.debug("Adding task with duplicate id %s", stored.id)
            self._tasks.append(stored)
        return stored

    def remove_task(self, task_id: str) -> int:
        """Remove every task with this id and return how many were dropped."""
        with self._lock:
            before = len(self._tasks)
            self._tasks = [task for task in self._tasks if task.id != task_id]
            removed = before - len(self._tasks)
        if not removed:
            logger.debug("remove_task: no task with id %s", task_id)
        return removed

    def update_task_status(self, task_id: str, new_status: TaskStatus) -> Optional[TaskT]:
        """Set the status of the first task with this id.

        ``completed`` follows from the new status. Returns the updated
        task, or None when no task has the id.
        """
        new_status = TaskStatus(new_status)
        with self._lock:
            for task in self._tasks:
                if task.id == task_id:
                    task.status = new_status
                    return task
        logger.debug("update_task_status: no task with id %s", task_id)
        return None

    def get_task(self, task_id: str) -> Optional[TaskT]:
        with self._lock:
            for task in self._tasks:
                if task.id == task_id:
                    return task
        return None

    def filter_by_status(self, status: TaskStatus) -> List[TaskT]:
        status = TaskStatus(status)
        with self._lock:
            return [task for task in self._tasks if task.status == status]

    def get_all_tasks(self) -> List[TaskT]:
        """Return a snapshot list of every task in insertion order."""
        with self._lock:
            return list(self._tasks)


class RegularTaskManager(TaskManager[BaseTask]):
    """Manager pinned to plain tasks."""


class PriorityTaskManager(TaskManager[PriorityTask]):
    """Manager for prioritized tasks, with priority filters."""

    def filter_by_priority(self, level: PriorityLevel) -> List[PriorityTask]:
        level = PriorityLevel(level)
        with self._lock:
            return [task for task in self._tasks if task.priority == level]

    def get_urgent_tasks(self) -> List[PriorityTask]:
        return self.filter_by_priority(PriorityLevel.URGENT)
