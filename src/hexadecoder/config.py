"""Runtime settings and logging setup."""

import logging
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class ContainerSettings(BaseSettings):
    """
    Output container choice read from HEXADECODER_DEFAULT_CONTAINER or a .env file.

    hexa() reads only this class, never the logging fields.
    """

    model_config = SettingsConfigDict(
        env_prefix="HEXADECODER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    default_container: Literal["bytes", "bytearray"] = Field(
        default="bytes", description="Container returned by hexa() when none is given"
    )


class DecoderSettings(ContainerSettings):
    """
    Settings read from HEXADECODER_* environment variables or a .env file.

    None of these change how strictly input is decoded.
    """

    log_level: str = Field(default="WARNING", description="Log level for the hexadecoder loggers")
    log_format: str = Field(default=DEFAULT_LOG_FORMAT, description="logging.Formatter format string")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


_settings: Optional[DecoderSettings] = None
_container_settings: Optional[ContainerSettings] = None


def get_settings() -> DecoderSettings:
    """Get or create default settings."""
    global _settings
    if _settings is None:
        _settings = DecoderSettings()
    return _settings


def get_container_settings() -> ContainerSettings:
    """Get or create the container settings used by hexa()."""
    global _container_settings
    if _container_settings is None:
        _container_settings = ContainerSettings()
    return _container_settings


def reset_settings():
    """Reset cached settings (for testing)."""
    global _settings, _container_settings
    _settings = None
    _container_settings = None


def configure_logging(settings: Optional[DecoderSettings] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger using the given settings.

    Calling it again replaces the handler installed by the previous call.

    Args:
        settings: Settings to apply (defaults to get_settings())

    Returns:
        logging.Logger: The configured "hexadecoder" logger
    """
    settings = settings or get_settings()
    logger = logging.getLogger("hexadecoder")
    logger.setLevel(settings.log_level)

    for handler in list(logger.handlers):
        if getattr(handler, "_hexadecoder_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(settings.log_format))
    handler._hexadecoder_handler = True
    logger.addHandler(handler)
    return logger
