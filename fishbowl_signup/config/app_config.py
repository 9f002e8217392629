"""Settings for running the signup API as a service.

Values come from the host environment or a ``.env`` file.  The
subscription client itself reads none of them; they only shape the
FastAPI process started by ``python -m fishbowl_signup``: where uvicorn
binds and how Loguru is configured.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()

_APP_ENVS = ("development", "staging", "production")
_LOGURU_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseSettings):
    """Process-level configuration for the signup API."""

    app_env: str = Field("development", description="Deployment stage name.")
    app_debug: bool = Field(False, description="Show variable values in Loguru tracebacks.")
    app_host: str = Field("127.0.0.1", description="Interface uvicorn binds to.")
    app_port: int = Field(8000, description="Port uvicorn listens on.")

    log_level: str = Field("INFO", description="Minimum Loguru level for every sink.")
    log_file: Optional[str] = Field(None, description="Rotating log file; stdout only when unset.")

    @field_validator("app_env")
    def validate_app_env(cls, value: str) -> str:
        if value not in _APP_ENVS:
            raise ValueError(f"APP_ENV must be one of {', '.join(_APP_ENVS)}")
        return value

    @field_validator("app_port")
    def validate_app_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError("APP_PORT must be between 1 and 65535")
        return value

    @field_validator("log_level")
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOGURU_LEVELS:
            raise ValueError("LOG_LEVEL must be a valid Loguru level")
        return level

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache()
def get_app_config() -> AppConfig:
    """Return the process-wide configuration, loaded once."""

    return AppConfig()
