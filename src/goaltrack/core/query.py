"""Pure view projections over the objective model - no I/O, no mutation."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from .model import Objective, Task, priority_rank

DUE_SOON_DAYS = 2


class FilterMode(Enum):
    """Which tasks a view shows by completion state."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


class DueStatus(Enum):
    """Due-date classification of a task relative to today."""

    NONE = "none"
    OVERDUE = "overdue"
    DUE_SOON = "due-soon"


@dataclass(frozen=True)
class ViewContext:
    """Filter and search inputs supplied by the presentation layer."""

    filter_mode: FilterMode = FilterMode.ALL
    search_text: str = ""

    @property
    def is_default(self) -> bool:
        """No filter and no search active."""
        return self.filter_mode is FilterMode.ALL and not self.search_text

    def matches(self, task: Task) -> bool:
        """True if the task passes both the filter mode and the search text."""
        if self.filter_mode is FilterMode.ACTIVE and task.done:
            return False
        if self.filter_mode is FilterMode.COMPLETED and not task.done:
            return False
        needle = self.search_text.lower()
        return not needle or needle in task.text.lower()


@dataclass(frozen=True)
class ObjectiveStats:
    total: int
    done: int
    percent: int


@dataclass(frozen=True)
class OverallStats:
    total_objectives: int
    total_tasks: int
    completed_tasks: int
    percent: int


def completion_percent(done: int, total: int) -> int:
    """Percent complete, rounded half-up to the nearest integer. 0 when total is 0."""
    if total <= 0:
        return 0
    # Integer arithmetic: round() is banker's rounding
    return (200 * done + total) // (2 * total)


def filter_tasks(tasks: list[Task], context: ViewContext) -> list[Task]:
    """
    Keep tasks matching the view context's filter mode and search text.

    Pure function - input order preserved.
    """
    return [t for t in tasks if context.matches(t)]


def _display_key(task: Task) -> tuple[bool, int]:
    # Incomplete before completed, then by priority rank
    return (task.done, priority_rank(task.priority))


def sort_for_display(tasks: list[Task]) -> list[Task]:
    """
    Sort tasks for display: incomplete first, then high > medium > low > none.

    Stable: tasks with equal keys keep their relative order.
    """
    return sorted(tasks, key=_display_key)


def display_tasks(objective: Objective, context: ViewContext) -> list[tuple[int, Task]]:
    """
    Filtered, display-sorted tasks paired with their canonical positions.

    The index in each pair addresses the task in objective.tasks, so
    callers can toggle or delete what they show.
    """
    indexed = [(i, t) for i, t in enumerate(objective.tasks) if context.matches(t)]
    return sorted(indexed, key=lambda pair: _display_key(pair[1]))


def due_status(task: Task, today: date | None = None, soon_days: int = DUE_SOON_DAYS) -> DueStatus:
    """
    Classify a task's due date relative to today.

    Done tasks and tasks without a due date are never flagged.
    """
    if not task.due_date or task.done:
        return DueStatus.NONE
    today = today or date.today()
    days = (task.due_date - today).days
    if days < 0:
        return DueStatus.OVERDUE
    if days <= soon_days:
        return DueStatus.DUE_SOON
    return DueStatus.NONE


def objective_stats(objective: Objective) -> ObjectiveStats:
    """Task counts and completion percent for one objective."""
    total = len(objective.tasks)
    done = sum(1 for t in objective.tasks if t.done)
    return ObjectiveStats(total=total, done=done, percent=completion_percent(done, total))


def overall_stats(objectives: list[Objective]) -> OverallStats:
    """Aggregate counts and completion percent across all objectives."""
    total_tasks = sum(len(o.tasks) for o in objectives)
    completed = sum(1 for o in objectives for t in o.tasks if t.done)
    return OverallStats(
        total_objectives=len(objectives),
        total_tasks=total_tasks,
        completed_tasks=completed,
        percent=completion_percent(completed, total_tasks),
    )


def visible_objectives(objectives: list[Objective], context: ViewContext) -> list[Objective]:
    """
    Objectives that have at least one task passing the view context.

    With the default context every objective is visible, including ones
    with no tasks.
    """
    if context.is_default:
        return list(objectives)
    return [o for o in objectives if filter_tasks(o.tasks, context)]


def format_due_date(due: date) -> str:
    """Short label for a due date, e.g. "Mar 15"."""
    return f"{due.strftime('%b')} {due.day}"
