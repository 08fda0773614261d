"""File-based objective storage adapter."""

import json
import logging
from pathlib import Path

from goaltrack.core.errors import InvalidImportFormat, PersistenceReadFailure
from goaltrack.core.model import Objective, dump_objectives, parse_objectives

logger = logging.getLogger(__name__)


class FileObjectiveStore:
    """
    JSON file storage for the objective model.

    Implements ObjectiveStore protocol. The whole model lives in one file
    and is rewritten on every save.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def read(self) -> list[Objective]:
        """Read and validate the slot. Raises PersistenceReadFailure."""
        if not self.path.exists():
            raise PersistenceReadFailure(f"No data file at {self.path}")
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, RecursionError, json.JSONDecodeError) as e:
            raise PersistenceReadFailure(f"Cannot read {self.path}: {e}") from e
        try:
            return parse_objectives(data)
        except InvalidImportFormat as e:
            raise PersistenceReadFailure(f"Malformed data in {self.path}: {e}") from e

    def load(self) -> list[Objective]:
        """Load all objectives. Returns [] if the slot is missing or corrupt."""
        try:
            objectives = self.read()
        except PersistenceReadFailure as e:
            if self.path.exists():
                logger.warning(f"Starting with no objectives: {e}")
            else:
                logger.debug(f"Starting with no objectives: {e}")
            return []
        logger.debug(f"Loaded {len(objectives)} objectives from {self.path}")
        return objectives

    def save(self, objectives: list[Objective]) -> None:
        """Overwrite the slot with the full model."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(dump_objectives(objectives), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        logger.debug(f"Saved {len(objectives)} objectives to {self.path}")
