from .task import (
    BaseTask,
    PriorityLevel,
    PriorityTask,
    RecurringTask,
    TaskFrequency,
    TaskLike,
    TaskStatus,
)

# Export all models for easy importing
__all__ = [
    "BaseTask",
    "PriorityLevel",
    "PriorityTask",
    "RecurringTask",
    "TaskFrequency",
    "TaskLike",
    "TaskStatus",
]
