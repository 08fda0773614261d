"""Functional core - pure business logic with no I/O."""

from .errors import IndexOutOfRange, InvalidImportFormat, PersistenceReadFailure
from .model import Objective, Task, Priority, parse_objectives, dump_objectives
from .query import (
    DueStatus,
    FilterMode,
    ViewContext,
    ObjectiveStats,
    OverallStats,
    filter_tasks,
    sort_for_display,
    display_tasks,
    due_status,
    objective_stats,
    overall_stats,
    visible_objectives,
    format_due_date,
)
from .mutations import (
    add_objective,
    delete_objective,
    add_task,
    toggle_task,
    delete_task,
    edit_objective,
    edit_task,
    reorder_task,
    move_task,
    replace_model,
)

__all__ = [
    # Errors
    "IndexOutOfRange",
    "InvalidImportFormat",
    "PersistenceReadFailure",
    # Model
    "Objective",
    "Task",
    "Priority",
    "parse_objectives",
    "dump_objectives",
    # Queries
    "DueStatus",
    "FilterMode",
    "ViewContext",
    "ObjectiveStats",
    "OverallStats",
    "filter_tasks",
    "sort_for_display",
    "display_tasks",
    "due_status",
    "objective_stats",
    "overall_stats",
    "visible_objectives",
    "format_due_date",
    # Mutations
    "add_objective",
    "delete_objective",
    "add_task",
    "toggle_task",
    "delete_task",
    "edit_objective",
    "edit_task",
    "reorder_task",
    "move_task",
    "replace_model",
]
