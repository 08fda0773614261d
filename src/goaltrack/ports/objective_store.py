"""Objective storage interface."""

from typing import Protocol

from goaltrack.core.model import Objective


class ObjectiveStore(Protocol):
    """Interface for the durable slot holding the whole model."""

    def load(self) -> list[Objective]:
        """Load all objectives. Returns [] if the slot is missing or corrupt."""
        ...

    def save(self, objectives: list[Objective]) -> None:
        """Overwrite the slot with the full model."""
        ...
