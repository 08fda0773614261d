"""Adapters - I/O implementations of ports."""

from .file_store import FileObjectiveStore
from .backup import export_backup, read_backup, backup_filename

__all__ = [
    "FileObjectiveStore",
    "export_backup",
    "read_backup",
    "backup_filename",
]
