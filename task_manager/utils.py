"""Filtering and sorting helpers that work on any task record shape."""
from functools import cmp_to_key
from typing import Callable, Iterable, List, TypeVar

from .models import TaskLike

T = TypeVar("T", bound=TaskLike)


def filter_tasks(tasks: Iterable[T], predicate: Callable[[T], bool]) -> List[T]:
    """Return the tasks for which ``predicate`` is true, in input order."""
    return [task for task in tasks if predicate(task)]


def sort_tasks(tasks: Iterable[T], comparator: Callable[[T, T], int]) -> List[T]:
    """Return a new list ordered by ``comparator``.

    The comparator returns a negative number when ``a`` sorts first, zero for
    a tie and a positive number otherwise. The sort is stable: tied tasks keep
    their input order. The input is not modified.
    """
    return sorted(tasks, key=cmp_to_key(comparator))


def by_title(a: TaskLike, b: TaskLike) -> int:
    """Comparator ordering tasks by title, ignoring case."""
    left, right = a.title.casefold(), b.title.casefold()
    return (left > right) - (left < right)


def keyword_predicate(keyword: str) -> Callable[[TaskLike], bool]:
    """Build a predicate matching tasks whose title or description mentions ``keyword``."""
    needle = keyword.lower()

    def _matches(task: TaskLike) -> bool:
        return needle in task.title.lower() or needle in task.description.lower()

    return _matches
