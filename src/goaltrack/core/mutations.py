"""
Model mutations - no I/O.

Every operation edits the caller's objective list in place and returns
True if the model changed. Empty titles and texts are silently ignored.
Persisting afterwards is the caller's job.
"""

from datetime import date
from typing import Any

from .errors import IndexOutOfRange
from .model import Objective, Priority, Task, parse_objectives

OBJECTIVE_FIELDS = ("title", "description")


def _objective_at(objectives: list[Objective], index: int) -> Objective:
    if not 0 <= index < len(objectives):
        raise IndexOutOfRange(f"No objective at position {index}")
    return objectives[index]


def _check_task_index(objective: Objective, index: int) -> None:
    if not 0 <= index < len(objective.tasks):
        raise IndexOutOfRange(
            f"No task at position {index} in objective {objective.title!r}"
        )


def add_objective(objectives: list[Objective], title: str, description: str = "") -> bool:
    title = (title or "").strip()
    if not title:
        return False
    objectives.append(Objective(title=title, description=(description or "").strip()))
    return True


def delete_objective(objectives: list[Objective], index: int) -> bool:
    """Remove an objective and all of its tasks. Confirmation is the caller's concern."""
    _objective_at(objectives, index)
    del objectives[index]
    return True


def add_task(
    objectives: list[Objective],
    obj_index: int,
    text: str,
    due_date: date | None = None,
    priority: Priority | str | None = None,
) -> bool:
    """Append a new, not-done task. Raises ValueError for an unknown priority."""
    objective = _objective_at(objectives, obj_index)
    text = (text or "").strip()
    if not text:
        return False
    objective.tasks.append(
        Task(text=text, done=False, due_date=due_date, priority=Priority.parse(priority))
    )
    return True


def toggle_task(objectives: list[Objective], obj_index: int, task_index: int) -> bool:
    objective = _objective_at(objectives, obj_index)
    _check_task_index(objective, task_index)
    task = objective.tasks[task_index]
    task.done = not task.done
    return True


def delete_task(objectives: list[Objective], obj_index: int, task_index: int) -> bool:
    objective = _objective_at(objectives, obj_index)
    _check_task_index(objective, task_index)
    del objective.tasks[task_index]
    return True


def edit_objective(objectives: list[Objective], obj_index: int, field: str, value: str) -> bool:
    """
    Replace an objective's title or description.

    A blank title is ignored (an objective is never untitled); a blank
    description clears it.
    """
    if field not in OBJECTIVE_FIELDS:
        raise ValueError(f"Unknown objective field: {field!r}")
    objective = _objective_at(objectives, obj_index)
    value = (value or "").strip()
    if field == "title":
        if not value:
            return False
        objective.title = value
    else:
        objective.description = value
    return True


def edit_task(objectives: list[Objective], obj_index: int, task_index: int, text: str) -> bool:
    objective = _objective_at(objectives, obj_index)
    _check_task_index(objective, task_index)
    text = (text or "").strip()
    if not text:
        return False
    objective.tasks[task_index].text = text
    return True


def reorder_task(
    objectives: list[Objective], obj_index: int, from_index: int, to_index: int
) -> bool:
    """
    Move a task within one objective so it ends up at to_index.

    Remove-then-insert: after the task is popped, positions past it shift
    down by one, so inserting at to_index lands it exactly on the target.
    [A, B, C] moving 0 -> 2 gives [B, C, A].
    """
    objective = _objective_at(objectives, obj_index)
    _check_task_index(objective, from_index)
    _check_task_index(objective, to_index)
    if from_index == to_index:
        return False
    task = objective.tasks.pop(from_index)
    objective.tasks.insert(to_index, task)
    return True


def move_task(
    objectives: list[Objective],
    src_obj: int,
    src_task: int,
    dst_obj: int,
    dst_task: int,
) -> bool:
    """
    Drag-and-drop entry point.

    Tasks never change owner: a drop onto a different objective is a no-op.
    """
    if src_obj != dst_obj:
        return False
    return reorder_task(objectives, src_obj, src_task, dst_task)


def replace_model(objectives: list[Objective], data: Any) -> bool:
    """
    Replace the whole model with an imported payload.

    Raises InvalidImportFormat, leaving objectives untouched, unless data
    is a list of objective records.
    """
    replacement = parse_objectives(data)
    objectives[:] = replacement
    return True
