"""Settings loading and validation."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from .errors import ConfigException

logger = logging.getLogger(__name__)

ENV_PREFIX = "FIELDSCHEMA_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Engine settings.

    ``strict`` switches spec/target shape mismatches from a logged warning
    to a ``SchemaTransformError``.
    """

    strict: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    log_file: Optional[str] = None

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX)

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: '{v}'. Expected one of {', '.join(LOG_LEVELS)}"
            )
        return level

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )

    @classmethod
    def load_from_file(cls, config_path: str) -> "Settings":
        """Load settings from a TOML file; environment variables take precedence."""
        path = Path(config_path)
        if not path.exists():
            raise ConfigException(f"Settings file not found: {config_path}")

        class _Settings(cls):
            model_config = SettingsConfigDict(
                toml_file=str(path),
                env_prefix=ENV_PREFIX,
            )

        try:
            return _Settings()
        except ValidationError as e:
            error_lines = ["Settings validation failed:"]
            for error in e.errors():
                loc = " -> ".join(str(item) for item in error["loc"])
                error_lines.append(f"  - {loc}: {error['msg']}")
            raise ConfigException("\n".join(error_lines)) from e


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigException(f"Invalid {ENV_PREFIX}* environment: {e}") from e


def resolve_strict(strict: Optional[bool]) -> bool:
    """Return the strict flag for a transform call.

    ``None`` reads the configured setting. Settings that fail to load fall
    back to non-strict with a warning, so a bad unrelated variable such as
    ``FIELDSCHEMA_LOG_LEVEL`` never makes a transform raise.
    """
    if strict is not None:
        return strict

    try:
        return get_settings().strict
    except ConfigException as e:
        logger.warning(f"Falling back to non-strict transforms: {e}")
        return False
