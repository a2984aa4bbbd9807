# Copyright 2025 Vijaykumar Singh <singhvjd@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration management for Roster."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError as PydanticValidationError
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from roster.core.errors import ConfigurationError, ErrorCategory

logger = logging.getLogger(__name__)

# Global config directory (~/.roster by default, overridable for tests)
GLOBAL_ROSTER_DIR = Path(os.getenv("ROSTER_CONFIG_DIR", str(Path.home() / ".roster")))

CONFIG_FILE_NAME = "config.yaml"

_LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}
_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_CONFIG_YAML = """\
# Roster configuration
log_level: WARNING
# log_file: /tmp/roster.log

# Reject add lines that are not exactly "Add <name> to <department>"
strict_add_parsing: true

# Print the whole directory after every menu command
show_directory_dump: true
"""


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="ROSTER_",
        env_file=".env" if not os.getenv("ROSTER_SKIP_ENV_FILE") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    # Directory session
    strict_add_parsing: bool = True
    show_directory_dump: bool = True

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown levels."""
        level = v.strip().upper()
        level = _LOG_LEVEL_ALIASES.get(level, level)
        if level not in _VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{v}'. Expected one of: {', '.join(_VALID_LOG_LEVELS)}"
            )
        return level

    @classmethod
    def get_config_dir(cls) -> Path:
        """Get configuration directory path."""
        return GLOBAL_ROSTER_DIR

    @classmethod
    def default_config_file(cls) -> Path:
        """Get the default YAML configuration file path."""
        return cls.get_config_dir() / CONFIG_FILE_NAME


def read_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Read settings values from a YAML file.

    Args:
        path: YAML file to read

    Returns:
        Mapping of setting names to values (empty for an empty file)

    Raises:
        ConfigurationError: If the file cannot be read or is not a mapping
    """
    config_path = Path(path)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(
            f"Cannot read config file {config_path}: file not found",
            config_key=str(config_path),
            category=ErrorCategory.CONFIG_MISSING,
            recovery_hint="Check the --config path or run 'roster init'.",
            cause=e,
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read config file {config_path}: {e}",
            config_key=str(config_path),
            cause=e,
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in config file {config_path}: {e}",
            config_key=str(config_path),
            recovery_hint="Fix the YAML syntax or run 'roster init' to regenerate it.",
            cause=e,
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {config_path} must contain a mapping, got {type(data).__name__}",
            config_key=str(config_path),
        )
    return data


def load_settings(
    config_path: Optional[Union[str, Path]] = None,
    **overrides: Any,
) -> Settings:
    """Load application settings.

    Values are layered as: explicit overrides, then the YAML config file,
    then ``ROSTER_*`` environment variables and ``.env``, then defaults.
    An explicitly given ``config_path`` must exist; the default file is
    optional.

    Args:
        config_path: YAML file to read instead of ``~/.roster/config.yaml``
        **overrides: Setting values that win over every other source;
            ``None`` values are ignored

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If the config file or a setting value is invalid
    """
    values: Dict[str, Any] = {}

    if config_path is not None:
        values.update(read_config_file(config_path))
    else:
        default_file = Settings.default_config_file()
        if default_file.exists():
            logger.debug("Loading settings from %s", default_file)
            values.update(read_config_file(default_file))

    values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return Settings(**values)
    except PydanticValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first.get("loc", ())) or None
        raise ConfigurationError(
            f"Invalid setting {key}: {first.get('msg')}",
            config_key=key,
            cause=e,
        ) from e
