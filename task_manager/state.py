from typing import Optional
import logging

from .config import TASKS_FILE
from .loader import TaskManagers, build_managers, load_tasks_from_file

logger = logging.getLogger(__name__)

_managers: Optional[TaskManagers] = None


def load_managers(file_path: str = TASKS_FILE) -> TaskManagers:
    """(Re)load the process-wide managers from a tasks file."""
    global _managers
    _managers = build_managers(load_tasks_from_file(file_path))
    return _managers


def get_managers() -> TaskManagers:
    """Dependency returning the loaded managers, loading them on first use."""
    if _managers is None:
        logger.info("Managers not loaded yet, loading %s", TASKS_FILE)
        return load_managers()
    return _managers
