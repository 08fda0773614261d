"""Objective/task data model - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any

from .errors import InvalidImportFormat


class Priority(Enum):
    """Task priority. Lower rank sorts first."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]

    @classmethod
    def parse(cls, value: "str | Priority | None") -> "Priority | None":
        """Accept a Priority, its string value, or empty/None for no priority."""
        if value is None or value == "":
            return None
        if isinstance(value, Priority):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown priority: {value!r}") from None


_PRIORITY_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}
NO_PRIORITY_RANK = 3


def priority_rank(priority: Priority | None) -> int:
    """Sort rank for a priority: high(0) < medium(1) < low(2) < none(3)."""
    return priority.rank if priority else NO_PRIORITY_RANK


@dataclass
class Task:
    """A task owned by exactly one objective."""

    text: str
    done: bool = False
    due_date: date | None = None
    priority: Priority | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "done": self.done,
            "dueDate": self.due_date.isoformat() if self.due_date else None,
            "priority": self.priority.value if self.priority else None,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Task":
        """Build a Task from a stored record. Raises InvalidImportFormat."""
        if not isinstance(data, dict):
            raise InvalidImportFormat(f"Task must be an object, got {type(data).__name__}")

        text = data.get("text")
        if not isinstance(text, str) or not text.strip():
            raise InvalidImportFormat("Task is missing a non-empty 'text'")

        done = data.get("done", False)
        if done is None:
            done = False
        if not isinstance(done, bool):
            raise InvalidImportFormat(f"Task 'done' must be true/false, got {done!r}")

        due = None
        raw_due = data.get("dueDate")
        if raw_due:
            if not isinstance(raw_due, str):
                raise InvalidImportFormat(f"Task 'dueDate' must be a string, got {raw_due!r}")
            try:
                # Tolerate a time component, keep the calendar date only
                due = date.fromisoformat(raw_due.split("T")[0])
            except ValueError:
                raise InvalidImportFormat(f"Invalid dueDate: {raw_due!r}") from None

        try:
            priority = Priority.parse(data.get("priority"))
        except ValueError as e:
            raise InvalidImportFormat(str(e)) from None

        return cls(text=text, done=done, due_date=due, priority=priority)


@dataclass
class Objective:
    """A goal with an ordered list of tasks it exclusively owns."""

    title: str
    description: str = ""
    tasks: list[Task] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "tasks": [t.to_dict() for t in self.tasks],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Objective":
        """Build an Objective from a stored record. Raises InvalidImportFormat."""
        if not isinstance(data, dict):
            raise InvalidImportFormat(
                f"Objective must be an object, got {type(data).__name__}"
            )

        title = data.get("title")
        if not isinstance(title, str) or not title.strip():
            raise InvalidImportFormat("Objective is missing a non-empty 'title'")

        description = data.get("description") or ""
        if not isinstance(description, str):
            raise InvalidImportFormat("Objective 'description' must be a string")

        tasks = data.get("tasks")
        if tasks is None:
            tasks = []
        if not isinstance(tasks, list):
            raise InvalidImportFormat(f"Objective 'tasks' must be a list in {title!r}")

        return cls(
            title=title,
            description=description,
            tasks=[Task.from_dict(t) for t in tasks],
        )


def parse_objectives(data: Any) -> list[Objective]:
    """
    Validate and convert a decoded payload into objectives.

    The payload must be a list of objective records. Raises
    InvalidImportFormat on any shape mismatch.
    """
    if not isinstance(data, list):
        raise InvalidImportFormat(
            f"Expected a list of objectives, got {type(data).__name__}"
        )
    return [Objective.from_dict(item) for item in data]


def dump_objectives(objectives: list[Objective]) -> list[dict[str, Any]]:
    """Convert objectives to plain records ready for JSON encoding."""
    return [o.to_dict() for o in objectives]
