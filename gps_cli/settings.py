"""Settings for gps.

Settings live in a single YAML file (``~/.gps/settings.yaml`` unless
``GPS_SETTINGS`` points elsewhere). Every key is optional; a missing file
means all defaults. The defaults reproduce the built-in profile layout:

- ``work``: the global git identity on ``github.com``
- ``personal``: ``~/.gitconfig-personal`` on ``github.com-personal``
- one profile per ``Host github.com-<suffix>`` in ``~/.ssh/config``
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError

from .errors import SettingsError

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "GPS_SETTINGS"


class ProfileNames(BaseModel):
    """Names given to the built-in profiles."""

    work: str = Field(default="work", description="Profile built from the global git identity")
    personal: str = Field(default="personal", description="Profile built from the personal identity file")


class HostSettings(BaseModel):
    """SSH host aliases used to tell accounts apart."""

    default: str = Field(default="github.com", description="Host for the work profile")
    alias_prefix: str = Field(default="github.com-", description="Prefix marking per-account host aliases")
    personal: str = Field(default="github.com-personal", description="Host alias for the personal profile")


class LoggingSettings(BaseModel):
    """JSONL log sink configuration."""

    path: str | None = Field(default=None, description="JSONL log file; logging to file is off when unset")
    level: str = Field(default="INFO", description="Root log level")


class GpsSettings(BaseModel):
    """Complete gps settings."""

    profiles: ProfileNames = Field(default_factory=ProfileNames)
    hosts: HostSettings = Field(default_factory=HostSettings)
    personal_identity_file: str = Field(
        default="~/.gitconfig-personal", description="git config file holding the personal identity"
    )
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def default_settings_path() -> Path:
    override = os.environ.get(SETTINGS_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".gps" / "settings.yaml"


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {path} must contain a mapping, got {type(data).__name__}")
    return data


def load_settings(path: Path | None = None) -> GpsSettings:
    """Load settings from ``path`` (default location when None).

    Raises:
        SettingsError: The file exists but is not valid YAML or fails validation.
    """
    path = path or default_settings_path()
    if not path.exists():
        logger.debug(f"No settings file at {path}, using defaults")
        return GpsSettings()

    data = _read_yaml(path)
    try:
        settings = GpsSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {path}: {e}") from e

    logger.debug(f"Loaded settings from {path}")
    return settings
