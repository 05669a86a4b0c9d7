"""Configuration loading for scope definitions.

Scope definitions and the log level can come from, in priority order:
    1. Keyword arguments
    2. Environment variables (`SCOPEBITS_LOG_LEVEL`, `SCOPEBITS_SCOPES` as JSON)
    3. A YAML file (`config.yml` in the working directory by default, or the
       path in `SCOPEBITS_CONFIG_FILE`, or the `config_file` argument)
    4. Default values
"""

import logging
import os
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)
from scopebits.exceptions import ConfigError, ConfigValidationError
from scopebits.models import RawScope
from scopebits.registry import Registry

CONFIG_FILE_ENV_VAR = "SCOPEBITS_CONFIG_FILE"
DEFAULT_CONFIG_FILE = "config.yml"

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class ScopeBitsSettings(BaseSettings):
    """Settings holding the scope definitions a registry is built from.

    Examples:
        >>> settings = ScopeBitsSettings(log_level="info")
        >>> settings.scopes
        []

    Raises:
        scopebits.exceptions.ConfigValidationError: If the loaded values do not validate.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCOPEBITS_",
        frozen=True,
        extra="ignore",
        yaml_file=DEFAULT_CONFIG_FILE,
    )

    log_level: Literal["debug", "info", "warn", "warning", "error"] = Field(
        default="error",
        description="The minimum level of logs to display.",
    )
    scopes: list[RawScope] = Field(
        default_factory=list,
        description="The raw scope definitions (name, checksum, tags).",
    )

    def __init__(self, **values: Any) -> None:
        """Initialize the settings and handle validation errors."""
        try:
            super().__init__(**values)
        except ValidationError as e:
            raise ConfigValidationError("Error validating configuration.") from e

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Read init values, then env vars, then the YAML file if there is one."""
        config_file_path = cls._get_config_file_path()
        if config_file_path is not None:
            return (
                init_settings,
                env_settings,
                YamlConfigSettingsSource(settings_cls, yaml_file=config_file_path),
            )
        return (init_settings, env_settings)

    @classmethod
    def _get_config_file_path(cls) -> Path | None:
        """Locate the YAML config file, if any.

        `SCOPEBITS_CONFIG_FILE` wins over the `yaml_file` model config.
        """
        yaml_file = os.environ.get(CONFIG_FILE_ENV_VAR) or cls.model_config.get(
            "yaml_file"
        )
        if yaml_file and Path(str(yaml_file)).is_file():
            return Path(str(yaml_file))
        return None

    def configure_logging(self) -> None:
        """Apply `log_level` to the package logger."""
        logging.getLogger("scopebits").setLevel(LOG_LEVELS[self.log_level])

    def build_registry(self) -> Registry:
        """Build a registry from the configured scopes."""
        return Registry.build(self.scopes)


def load_settings(
    config_file: str | Path | None = None, **values: Any
) -> ScopeBitsSettings:
    """Load settings, optionally from an explicit YAML file.

    Raises:
        ConfigError: If `config_file` is given but does not exist.
        ConfigValidationError: If the loaded values do not validate.

    """
    if config_file is None:
        return ScopeBitsSettings(**values)

    if not Path(config_file).is_file():
        raise ConfigError(f"Config file not found: {config_file}")

    class FileSettings(ScopeBitsSettings):
        @classmethod
        def _get_config_file_path(cls) -> Path | None:
            return Path(config_file)

    return FileSettings(**values)


def load_registry(config_file: str | Path | None = None, **values: Any) -> Registry:
    """Load settings, apply their log level and build the registry."""
    settings = load_settings(config_file, **values)
    settings.configure_logging()
    return settings.build_registry()
