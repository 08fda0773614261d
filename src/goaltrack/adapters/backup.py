"""Export/import of human-readable backup files."""

import json
import logging
from pathlib import Path
from typing import Any

from goaltrack.core.errors import InvalidImportFormat
from goaltrack.core.model import Objective, dump_objectives, parse_objectives

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = "-backup.json"


def backup_filename(plan_name: str) -> str:
    """File name for an export, e.g. "goals-backup.json"."""
    return f"{plan_name}{BACKUP_SUFFIX}"


def export_backup(objectives: list[Objective], directory: Path | str, plan_name: str) -> Path:
    """Write a pretty-printed backup of the model and return its path."""
    directory = Path(directory).expanduser()
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / backup_filename(plan_name)
    path.write_text(
        json.dumps(dump_objectives(objectives), indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    logger.info(f"Exported {len(objectives)} objectives to {path}")
    return path


def read_backup(path: Path | str) -> list[Any]:
    """
    Read a backup file and check its shape.

    Returns the decoded records, ready for replace_model. Raises
    InvalidImportFormat if the file is not JSON or not a list of
    objective records.
    """
    path = Path(path).expanduser()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, RecursionError, json.JSONDecodeError) as e:
        raise InvalidImportFormat(f"Cannot read {path}: {e}") from e
    parse_objectives(data)
    return data
