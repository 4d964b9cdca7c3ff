from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from pydantic import ValidationError

from ..config import SEARCH_KEYWORD
from ..loader import TaskManagers
from ..managers import TaskManager
from ..models import PriorityLevel, TaskStatus
from ..schemas.task import MODEL_FOR_KIND, StatusUpdate, TaskKind, TaskStats
from ..state import get_managers
from ..utils import by_title, filter_tasks, keyword_predicate, sort_tasks

router = APIRouter()


def _manager_for(kind: TaskKind, managers: TaskManagers) -> TaskManager:
    if kind == TaskKind.PRIORITY:
        return managers.priority
    if kind == TaskKind.RECURRING:
        return managers.recurring
    return managers.regular


@router.get("/stats", response_model=TaskStats)
def get_stats(managers: TaskManagers = Depends(get_managers)):
    """Counts matching the console report's statistics sections."""
    return TaskStats(
        regular=len(managers.regular),
        priority=len(managers.priority),
        recurring=len(managers.recurring),
        by_status={s.value: len(managers.regular.filter_by_status(s)) for s in TaskStatus},
        by_priority={p.value: len(managers.priority.filter_by_priority(p)) for p in PriorityLevel},
    )


@router.get("/tasks/search")
def search_tasks(
    keyword: str = SEARCH_KEYWORD,
    sort: Optional[str] = None,
    managers: TaskManagers = Depends(get_managers),
):
    """Regular and priority tasks mentioning ``keyword``, optionally sorted by title."""
    all_tasks = [*managers.regular.get_all_tasks(), *managers.priority.get_all_tasks()]
    found = filter_tasks(all_tasks, keyword_predicate(keyword))
    if sort == "title":
        found = sort_tasks(found, by_title)
    elif sort is not None:
        raise HTTPException(status_code=422, detail="Invalid sort field")
    return found


@router.get("/priority/urgent")
def get_urgent_tasks(managers: TaskManagers = Depends(get_managers)):
    return managers.priority.get_urgent_tasks()


@router.get("/priority/tasks/by-priority/{level}")
def get_tasks_by_priority(level: PriorityLevel, managers: TaskManagers = Depends(get_managers)):
    return managers.priority.filter_by_priority(level)


@router.get("/{kind}/tasks")
def get_tasks(
    kind: TaskKind,
    task_status: Optional[TaskStatus] = Query(None, alias="status"),
    managers: TaskManagers = Depends(get_managers),
):
    """Snapshot of a manager's tasks, optionally filtered by ``?status=``."""
    manager = _manager_for(kind, managers)
    if task_status is None:
        return manager.get_all_tasks()
    return manager.filter_by_status(task_status)


@router.get("/{kind}/tasks/{task_id}")
def get_task(kind: TaskKind, task_id: str, managers: TaskManagers = Depends(get_managers)):
    task = _manager_for(kind, managers).get_task(task_id)
    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.post("/{kind}/tasks", status_code=status.HTTP_201_CREATED)
def create_task(
    kind: TaskKind,
    payload: Dict[str, Any] = Body(...),
    managers: TaskManagers = Depends(get_managers),
):
    """Add a task; the body is validated against the record shape for ``kind``."""
    try:
        task = MODEL_FOR_KIND[kind].model_validate(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return _manager_for(kind, managers).add_task(task)


@router.patch("/{kind}/tasks/{task_id}/status")
def update_task_status(
    kind: TaskKind,
    task_id: str,
    update: StatusUpdate,
    managers: TaskManagers = Depends(get_managers),
):
    task = _manager_for(kind, managers).update_task_status(task_id, update.status)
    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.delete("/{kind}/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(kind: TaskKind, task_id: str, managers: TaskManagers = Depends(get_managers)):
    if not _manager_for(kind, managers).remove_task(task_id):
        raise HTTPException(status_code=404, detail="Task not found")
    return None
