from pydantic import BaseModel, ConfigDict, computed_field
from typing import Protocol
import enum


class TaskStatus(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class PriorityLevel(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class TaskFrequency(str, enum.Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class TaskLike(Protocol):
    """Attributes every task record shape carries.

    The record models below do not share a base class; anything exposing
    these attributes works with the free utilities in ``task_manager.utils``.
    """
    id: str
    title: str
    description: str
    status: TaskStatus
    completed: bool


def is_completed(status: TaskStatus) -> bool:
    return status == TaskStatus.COMPLETED


class BaseTask(BaseModel):
    """Plain task record.

    ``completed`` is computed from ``status`` and cannot be set on its own; a
    ``completed`` key in the input is ignored. Assignments are validated, so
    ``task.status = "completed"`` stores the enum member.
    """
    model_config = ConfigDict(validate_assignment=True)

    id: str
    title: str
    description: str = ""
    status: TaskStatus

    @computed_field
    @property
    def completed(self) -> bool:
        return is_completed(self.status)


class PriorityTask(BaseModel):
    """Task record tagged with a priority level."""
    model_config = ConfigDict(validate_assignment=True)

    id: str
    title: str
    description: str = ""
    status: TaskStatus
    priority: PriorityLevel

    @computed_field
    @property
    def completed(self) -> bool:
        return is_completed(self.status)


class RecurringTask(BaseModel):
    """Task record that repeats on a fixed frequency."""
    model_config = ConfigDict(validate_assignment=True)

    id: str
    title: str
    description: str = ""
    status: TaskStatus
    frequency: TaskFrequency

    @computed_field
    @property
    def completed(self) -> bool:
        return is_completed(self.status)
