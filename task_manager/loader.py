"""Load task records from a JSON file and feed them into managers."""
import json
import logging
from pathlib import Path
from typing import List, NamedTuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .managers import PriorityTaskManager, RegularTaskManager, TaskManager
from .models import BaseTask, PriorityTask, RecurringTask

logger = logging.getLogger(__name__)


class TasksFile(BaseModel):
    """Shape of the tasks JSON document.

    Example:
        {"regularTasks": [...], "priorityTasks": [...], "recurringTasks": [...]}
    """
    model_config = ConfigDict(populate_by_name=True)

    regular_tasks: List[BaseTask] = Field(default_factory=list, alias="regularTasks")
    priority_tasks: List[PriorityTask] = Field(default_factory=list, alias="priorityTasks")
    recurring_tasks: List[RecurringTask] = Field(default_factory=list, alias="recurringTasks")


class TaskManagers(NamedTuple):
    regular: RegularTaskManager
    priority: PriorityTaskManager
    recurring: TaskManager[RecurringTask]


def load_tasks_from_file(file_path: Union[str, Path]) -> TasksFile:
    """Read and validate a tasks file.

    Any read, parse or validation failure is logged and yields empty lists.
    """
    resolved_path = Path(file_path).resolve()
    try:
        data = json.loads(resolved_path.read_text(encoding="utf-8"))
        return TasksFile.model_validate(data)
    except (OSError, ValueError, ValidationError) as exc:
        logger.error("Error loading tasks from %s: %s", file_path, exc)
        return TasksFile()


def build_managers(tasks_file: TasksFile) -> TaskManagers:
    """Create one manager per record shape and add every loaded task."""
    managers = TaskManagers(
        regular=RegularTaskManager(),
        priority=PriorityTaskManager(),
        recurring=TaskManager[RecurringTask](),
    )
    for task in tasks_file.regular_tasks:
        managers.regular.add_task(task)
    for task in tasks_file.priority_tasks:
        managers.priority.add_task(task)
    for task in tasks_file.recurring_tasks:
        managers.recurring.add_task(task)
    logger.info(
        "Loaded %d regular, %d priority, %d recurring tasks",
        len(managers.regular),
        len(managers.priority),
        len(managers.recurring),
    )
    return managers
