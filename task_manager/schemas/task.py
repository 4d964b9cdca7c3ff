from pydantic import BaseModel
from typing import Dict
import enum

from ..models import BaseTask, PriorityTask, RecurringTask, TaskStatus


class TaskKind(str, enum.Enum):
    """Which record shape (and manager) a request addresses."""
    REGULAR = "regular"
    PRIORITY = "priority"
    RECURRING = "recurring"


MODEL_FOR_KIND = {
    TaskKind.REGULAR: BaseTask,
    TaskKind.PRIORITY: PriorityTask,
    TaskKind.RECURRING: RecurringTask,
}


class StatusUpdate(BaseModel):
    """Schema for changing a task's status."""
    status: TaskStatus


class TaskStats(BaseModel):
    """Counts per record shape, per status (regular tasks) and per priority."""
    regular: int
    priority: int
    recurring: int
    by_status: Dict[str, int]
    by_priority: Dict[str, int]
