"""Configuration loading for commitcheck.

Only ambient settings live here (working directory, verbosity). The ordered
check table itself is fixed in ``commitcheck.pipeline.steps``.
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from commitcheck.exceptions import ConfigError
from commitcheck.logging import get_logger

__all__ = [
    "CommitCheckConfig",
    "PROJECT_CONFIG_FILENAME",
    "load_config",
    "get_user_config_path",
]

logger = get_logger(__name__)

PROJECT_CONFIG_FILENAME = "commitcheck.yaml"

# Project config path chosen by load_config(); read by the settings sources.
_project_config_path: ContextVar[Path | None] = ContextVar(
    "project_config_path", default=None
)


class YamlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from YAML files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        yaml_file: Path | None = None,
    ):
        super().__init__(settings_cls)
        self.yaml_file = yaml_file
        self._config_data: dict[str, Any] = {}
        if yaml_file and yaml_file.exists():
            try:
                with open(yaml_file) as f:
                    loaded = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(
                    message=f"Invalid YAML in {yaml_file}: {e}",
                    field=None,
                    value=None,
                ) from e
            if loaded is None:
                logger.warning("config_file_empty", path=str(yaml_file))
            elif not isinstance(loaded, dict):
                raise ConfigError(
                    message=f"Config file {yaml_file} must contain a mapping",
                    value=loaded,
                )
            else:
                self._config_data = loaded

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        """Get value for a specific field from the YAML config."""
        if field_name in self._config_data:
            return self._config_data[field_name], field_name, False
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._config_data


class CommitCheckConfig(BaseSettings):
    """Root configuration object.

    Attributes:
        project_root: Directory every check runs in (default: current dir).
        verbosity: Log level used when no -v/-q flag is given.
    """

    model_config = SettingsConfigDict(
        env_prefix="COMMITCHECK_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    project_root: Path | None = None
    verbosity: Literal["error", "warning", "info", "debug"] = "warning"

    @field_validator("project_root")
    @classmethod
    def check_project_root_exists(cls, v: Path | None) -> Path | None:
        """Warn if project_root path doesn't exist."""
        if v is not None and not v.exists():
            logger.warning("project_root_missing", path=str(v))
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize the order of settings sources.

        Priority (highest to lowest):
        1. Init arguments
        2. Environment variables (COMMITCHECK_*)
        3. Project YAML config (./commitcheck.yaml or --config)
        4. User YAML config (~/.config/commitcheck/config.yaml)
        """
        project_config_path = (
            _project_config_path.get() or Path.cwd() / PROJECT_CONFIG_FILENAME
        )
        return (
            init_settings,
            env_settings,
            YamlConfigSource(settings_cls, project_config_path),
            YamlConfigSource(settings_cls, get_user_config_path()),
        )


def get_user_config_path() -> Path:
    """Get the path to the user configuration file.

    Returns:
        Path to ~/.config/commitcheck/config.yaml
    """
    return Path.home() / ".config" / "commitcheck" / "config.yaml"


def load_config(config_path: Path | None = None) -> CommitCheckConfig:
    """Load configuration with hierarchy: defaults -> user -> project -> env.

    Args:
        config_path: Optional path to project config file.
            Defaults to ./commitcheck.yaml

    Returns:
        CommitCheckConfig instance with merged configuration.

    Raises:
        ConfigError: If configuration is invalid.
    """
    if config_path is None:
        config_path = Path.cwd() / PROJECT_CONFIG_FILENAME

    if not config_path.exists():
        logger.info("project_config_not_found", path=str(config_path))

    token = _project_config_path.set(config_path)
    try:
        return CommitCheckConfig()
    except ValidationError as e:
        first_error = e.errors()[0]
        field = ".".join(str(loc) for loc in first_error["loc"])
        raise ConfigError(
            message=f"Invalid configuration: {first_error['msg']}",
            field=field,
            value=first_error.get("input"),
        ) from e
    finally:
        _project_config_path.reset(token)
