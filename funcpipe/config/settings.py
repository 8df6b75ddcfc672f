"""Application settings using Pydantic Settings.

This module defines the FuncpipeSettings class which loads configuration
from environment variables and .env files using pydantic-settings.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class FuncpipeSettings(BaseSettings):
    """Root settings for funcpipe.

    Attributes:
        debug (bool): Whether to include variable values in logged tracebacks.
        log_level (LogLevel): Minimum level of the stderr log sink.
        log_serialize (bool): Whether log records are written as JSON lines.
    """

    model_config = SettingsConfigDict(
        env_prefix="FUNCPIPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(default=False, description="Enable diagnostic tracebacks")
    log_level: LogLevel = Field(default="INFO", description="Minimum log level")
    log_serialize: bool = Field(default=False, description="Serialize log records to JSON")
