"""Console summary of a tasks file."""
from pathlib import Path
from typing import Union

from .loader import TaskManagers, build_managers, load_tasks_from_file
from .models import PriorityLevel, TaskStatus
from .utils import by_title, filter_tasks, keyword_predicate, sort_tasks


def run_task_management(file_path: Union[str, Path], keyword: str = "report") -> TaskManagers:
    """Load the tasks file, print statistics and walk through a few operations."""
    print(f"Task Management System - Loading from {file_path}")
    print("-------------------------------------------------")

    managers = build_managers(load_tasks_from_file(file_path))
    regular, priority, recurring = managers

    print("\nTask Statistics:")
    print(f"Regular Tasks: {len(regular.get_all_tasks())}")
    print(f"Priority Tasks: {len(priority.get_all_tasks())}")
    print(f"Recurring Tasks: {len(recurring.get_all_tasks())}")

    print("\nTask Status Breakdown:")
    print(f"Pending: {len(regular.filter_by_status(TaskStatus.PENDING))}")
    print(f"In Progress: {len(regular.filter_by_status(TaskStatus.IN_PROGRESS))}")
    print(f"Completed: {len(regular.filter_by_status(TaskStatus.COMPLETED))}")

    print("\nPriority Breakdown:")
    print(f"Urgent: {len(priority.filter_by_priority(PriorityLevel.URGENT))}")
    print(f"High: {len(priority.filter_by_priority(PriorityLevel.HIGH))}")
    print(f"Medium: {len(priority.filter_by_priority(PriorityLevel.MEDIUM))}")
    print(f"Low: {len(priority.filter_by_priority(PriorityLevel.LOW))}")

    print("\nDemonstrating Task Operations:")
    pending_tasks = regular.filter_by_status(TaskStatus.PENDING)
    if pending_tasks:
        task_id = pending_tasks[0].id
        print(f"Moving task {task_id} to in-progress...")
        regular.update_task_status(task_id, TaskStatus.IN_PROGRESS)

    high_priority_tasks = priority.filter_by_priority(PriorityLevel.HIGH)
    if high_priority_tasks:
        print("\nHigh Priority Tasks That Need Attention:")
        for task in high_priority_tasks:
            print(f"- {task.title}: {task.description}")

    print("\nTasks Sorted by Title:")
    all_tasks = [*regular.get_all_tasks(), *priority.get_all_tasks()]
    for index, task in enumerate(sort_tasks(all_tasks, by_title), start=1):
        print(f"{index}. {task.title}")

    print(f'\nTasks Containing "{keyword}":')
    keyword_tasks = filter_tasks(all_tasks, keyword_predicate(keyword))
    if keyword_tasks:
        for task in keyword_tasks:
            print(f"- {task.title}")
    else:
        print("No tasks found with that keyword.")

    return managers
