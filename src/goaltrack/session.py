"""Session layer between front-ends and the core.

A PlanSession owns the in-memory model for one process. Each mutation
method runs the core operation, then rewrites the store, then returns the
core's result. Front-ends re-query the core after every call.
"""

import logging
from datetime import date
from typing import Any

from .adapters.file_store import FileObjectiveStore
from .config import Config
from .core import mutations
from .core.model import Objective, Priority
from .ports.objective_store import ObjectiveStore

logger = logging.getLogger(__name__)


def get_store(config: Config) -> FileObjectiveStore:
    """Resolve the objective store from config."""
    return FileObjectiveStore(config.data_path)


class PlanSession:
    """Single owner of the objective model and its store."""

    def __init__(self, store: ObjectiveStore, objectives: list[Objective] | None = None):
        self.store = store
        self.objectives: list[Objective] = objectives if objectives is not None else []

    @classmethod
    def open(cls, store: ObjectiveStore) -> "PlanSession":
        """Load the model once from the store."""
        return cls(store, store.load())

    def _commit(self, op: str, changed: bool) -> bool:
        # Full rewrite after every mutation, changed or not
        self.store.save(self.objectives)
        if changed:
            logger.info(f"{op}: saved {len(self.objectives)} objectives")
        else:
            logger.debug(f"{op}: no change")
        return changed

    def add_objective(self, title: str, description: str = "") -> bool:
        return self._commit("add_objective", mutations.add_objective(self.objectives, title, description))

    def delete_objective(self, index: int) -> bool:
        return self._commit("delete_objective", mutations.delete_objective(self.objectives, index))

    def add_task(
        self,
        obj_index: int,
        text: str,
        due_date: date | None = None,
        priority: Priority | str | None = None,
    ) -> bool:
        changed = mutations.add_task(self.objectives, obj_index, text, due_date, priority)
        return self._commit("add_task", changed)

    def toggle_task(self, obj_index: int, task_index: int) -> bool:
        return self._commit("toggle_task", mutations.toggle_task(self.objectives, obj_index, task_index))

    def delete_task(self, obj_index: int, task_index: int) -> bool:
        return self._commit("delete_task", mutations.delete_task(self.objectives, obj_index, task_index))

    def edit_objective(self, obj_index: int, field: str, value: str) -> bool:
        changed = mutations.edit_objective(self.objectives, obj_index, field, value)
        return self._commit("edit_objective", changed)

    def edit_task(self, obj_index: int, task_index: int, text: str) -> bool:
        changed = mutations.edit_task(self.objectives, obj_index, task_index, text)
        return self._commit("edit_task", changed)

    def reorder_task(self, obj_index: int, from_index: int, to_index: int) -> bool:
        changed = mutations.reorder_task(self.objectives, obj_index, from_index, to_index)
        return self._commit("reorder_task", changed)

    def move_task(self, src_obj: int, src_task: int, dst_obj: int, dst_task: int) -> bool:
        changed = mutations.move_task(self.objectives, src_obj, src_task, dst_obj, dst_task)
        if not changed and src_obj != dst_obj:
            logger.info("move_task: tasks cannot move between objectives")
        return self._commit("move_task", changed)

    def replace_model(self, data: Any) -> bool:
        """Wholesale replacement (import). Caller confirms first."""
        return self._commit("replace_model", mutations.replace_model(self.objectives, data))
