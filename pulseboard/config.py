"""Global configuration storage for Pulseboard.

Stores user preferences in ~/.pulseboard/config.json. The home
directory can be moved with PULSEBOARD_HOME and the project data
directory with PULSEBOARD_DATA_DIR.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, ValidationError

from pulseboard.domain.project import SortKey

logger = logging.getLogger(__name__)

HOME_ENV = "PULSEBOARD_HOME"
DATA_DIR_ENV = "PULSEBOARD_DATA_DIR"


class Settings(BaseModel):
    """User settings."""

    data_dir: str | None = None  # defaults to <config dir>/data
    default_sort: SortKey | None = None

    def resolved_data_dir(self) -> Path:
        env_dir = os.environ.get(DATA_DIR_ENV)
        if env_dir:
            return Path(env_dir)
        if self.data_dir:
            return Path(self.data_dir).expanduser()
        return get_config_dir() / "data"


def get_config_dir() -> Path:
    """Get the Pulseboard config directory."""
    config_dir = Path(os.environ.get(HOME_ENV) or Path.home() / ".pulseboard")
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_settings() -> Settings:
    """Load settings, falling back to defaults for a missing or bad file."""
    config_file = get_config_dir() / "config.json"
    if config_file.exists():
        try:
            data = json.loads(config_file.read_text(encoding="utf-8"))
            return Settings(**data)
        except (json.JSONDecodeError, ValidationError, TypeError) as e:
            logger.warning(f"Ignoring invalid config file {config_file}: {e}")
    return Settings()


def save_settings(settings: Settings) -> None:
    """Save settings to the config directory."""
    config_file = get_config_dir() / "config.json"
    config_file.write_text(
        json.dumps(settings.model_dump(mode="json"), indent=2),
        encoding="utf-8",
    )
