"""
Runtime configuration for EcoPulse.
Values come from environment variables, optionally loaded from a .env file.
"""
import logging
import os
from typing import Literal, Optional, get_args

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv(verbose=False)

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o"
DEFAULT_TEMPERATURE = 0.2
DEFAULT_REQUEST_TIMEOUT = 60.0
DEFAULT_API_URL = "http://localhost:8000"
DEFAULT_LOG_LEVEL = "INFO"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS = get_args(LogLevel)


class Settings(BaseModel):
    """Model for EcoPulse runtime settings"""
    model: str = Field(DEFAULT_MODEL, description="Chat model used for analysis and forecasts")
    temperature: float = Field(DEFAULT_TEMPERATURE, ge=0.0, le=2.0, description="Sampling temperature")
    request_timeout: Optional[float] = Field(
        DEFAULT_REQUEST_TIMEOUT, gt=0, description="Per-call timeout in seconds, None disables it"
    )
    log_level: LogLevel = Field(DEFAULT_LOG_LEVEL, description="Root logging level")
    api_url: str = Field(DEFAULT_API_URL, description="Base URL of the EcoPulse API, used by the UI")


def _optional_float(value: Optional[str], default: Optional[float]) -> Optional[float]:
    if value is None or value.strip() == "":
        return default
    if value.strip().lower() in ("none", "off"):
        return None
    return float(value)


def _log_level(value: Optional[str]) -> str:
    if value is None or value.strip() == "":
        return DEFAULT_LOG_LEVEL
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        logger.warning(f"Unknown ECOPULSE_LOG_LEVEL {value!r}, using {DEFAULT_LOG_LEVEL}")
        return DEFAULT_LOG_LEVEL
    return level


def get_settings() -> Settings:
    """Build settings from the current process environment."""
    return Settings(
        model=os.environ.get("ECOPULSE_MODEL", DEFAULT_MODEL),
        temperature=float(os.environ.get("ECOPULSE_TEMPERATURE", DEFAULT_TEMPERATURE)),
        request_timeout=_optional_float(
            os.environ.get("ECOPULSE_REQUEST_TIMEOUT"), DEFAULT_REQUEST_TIMEOUT
        ),
        log_level=_log_level(os.environ.get("ECOPULSE_LOG_LEVEL")),
        api_url=os.environ.get("ECOPULSE_API_URL", DEFAULT_API_URL),
    )


def get_api_key() -> str:
    """Read the OpenAI API key at call time. A missing key is not an error here."""
    return os.environ.get("OPENAI_API_KEY", "")
