"""Configuration management for goaltrack."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.query import DUE_SOON_DAYS, FilterMode

logger = logging.getLogger(__name__)

GOALTRACK_HOME = Path(os.environ.get("GOALTRACK_HOME", Path.home() / "goaltrack"))
CONFIG_FILE = GOALTRACK_HOME / "config" / "goaltrack.conf"
DATA_DIR = GOALTRACK_HOME / "data"
DEFAULT_DATA_FILE = DATA_DIR / "objectives.json"


@dataclass
class Config:
    """goaltrack configuration."""

    data_file: str = ""
    plan_name: str = "goals"
    export_dir: str = ""
    due_soon_days: int = DUE_SOON_DAYS
    default_filter: FilterMode = FilterMode.ALL

    @property
    def data_path(self) -> Path:
        """Resolved path of the durable data file."""
        if self.data_file:
            return Path(self.data_file).expanduser()
        return DEFAULT_DATA_FILE

    @property
    def export_path(self) -> Path:
        """Directory exports are written to."""
        if self.export_dir:
            return Path(self.export_dir).expanduser()
        return Path.cwd()


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    # Handle quoted values with inline comments: "value" # comment
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from goaltrack.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_file":
                config.data_file = value
            case "plan_name":
                if value:
                    config.plan_name = value
            case "export_dir":
                config.export_dir = value
            case "due_soon_days":
                try:
                    config.due_soon_days = int(value)
                except ValueError:
                    logger.warning(f"Ignoring non-integer DUE_SOON_DAYS: {value!r}")
            case "default_filter":
                try:
                    config.default_filter = FilterMode(value.lower())
                except ValueError:
                    logger.warning(f"Ignoring unknown DEFAULT_FILTER: {value!r}")

    return config
