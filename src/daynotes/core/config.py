"""Configuration management for daynotes core."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from daynotes.core.types import CalendarSettings

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def get_env(key: str, default: str | None = None) -> str | None:
    """Get environment variable with optional default."""
    return os.getenv(key, default)


def get_env_int(key: str, default: int) -> int:
    """Get environment variable as integer."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"{key}={value!r} is not an integer, using {default}")
        return default


def get_env_float(key: str, default: float) -> float:
    """Get environment variable as float."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning(f"{key}={value!r} is not a number, using {default}")
        return default


def get_env_bool(key: str, default: bool = False) -> bool:
    """Get environment variable as boolean."""
    value = os.getenv(key, "").lower()
    if value in ("true", "1", "yes"):
        return True
    if value in ("false", "0", "no"):
        return False
    return default


# Vault location and daily note layout
VAULT_DIR = Path(
    get_env("DAYNOTES_VAULT_DIR", os.path.expanduser("~/vault"))
    or os.path.expanduser("~/vault")
).expanduser()
DAILY_FOLDER = get_env("DAYNOTES_DAILY_FOLDER", "daily") or "daily"
DAILY_FORMAT = get_env("DAYNOTES_DAILY_FORMAT", "%Y-%m-%d") or "%Y-%m-%d"

# Dot scaling
DEFAULT_WORDS_PER_DOT = 250
WORDS_PER_DOT = get_env_float("DAYNOTES_WORDS_PER_DOT", DEFAULT_WORDS_PER_DOT)

# Logging
LOG_LEVEL = get_env("LOG_LEVEL", "INFO") or "INFO"


def setup_logging() -> logging.Logger:
    """Configure and return logger."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    )
    return logging.getLogger(__name__)


def load_settings() -> CalendarSettings:
    """
    Build calendar settings from the environment.

    Reads DAYNOTES_WORDS_PER_DOT at call time so tests and callers can
    override it after import.

    Returns:
        Frozen CalendarSettings instance
    """
    return CalendarSettings(
        words_per_dot=get_env_float("DAYNOTES_WORDS_PER_DOT", DEFAULT_WORDS_PER_DOT)
    )
