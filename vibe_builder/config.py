"""
Configuration module for Vibe Builder

Loads and validates configuration from environment variables.
"""

import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

from .errors import ConfigurationError

# Load environment variables
load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    try:
        return float(value)
    except ValueError:
        return float("nan")


def _int(name: str, default: int) -> Optional[int]:
    """Integer setting; None when the value is not an integer."""
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        return None


class Config:
    """
    Centralized configuration for Vibe Builder.

    This class provides typed access to all configuration values.
    Values are read once at import time; tests may override the class
    attributes directly.
    """

    # Logging
    LOG_LEVEL: str = os.getenv("VIBE_LOG_LEVEL", "INFO").upper()
    DEBUG: bool = os.getenv("VIBE_DEBUG", "false").lower() == "true"

    # Classification rules (JSON override of the built-in rule tables)
    RULES_FILE: Optional[Path] = Path(os.environ["VIBE_RULES_FILE"]) if os.getenv("VIBE_RULES_FILE") else None

    # Build pipeline
    SPECIALIST_TIMEOUT: Optional[float] = _optional_float("VIBE_SPECIALIST_TIMEOUT")
    DERIVE_TOTAL_STEPS: bool = os.getenv("VIBE_DERIVE_TOTAL_STEPS", "false").lower() == "true"

    # Progress tracking
    COMPLETED_HISTORY: Optional[int] = _int("VIBE_COMPLETED_HISTORY", 100)
    PROGRESS_DETAIL_LIMIT: Optional[int] = _int("VIBE_PROGRESS_DETAIL_LIMIT", 20)

    @classmethod
    def validate(cls) -> bool:
        """
        Validate configuration values.

        Returns:
            True if configuration is valid

        Raises:
            ConfigurationError: If any value is out of range
        """
        errors = []

        if cls.LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"VIBE_LOG_LEVEL must be a logging level name, got '{cls.LOG_LEVEL}'")

        if cls.RULES_FILE is not None and not cls.RULES_FILE.exists():
            errors.append(f"VIBE_RULES_FILE does not exist: {cls.RULES_FILE}")

        timeout = cls.SPECIALIST_TIMEOUT
        if timeout is not None and not (timeout > 0):
            errors.append("VIBE_SPECIALIST_TIMEOUT must be a positive number of seconds")

        if cls.COMPLETED_HISTORY is None or cls.COMPLETED_HISTORY < 1:
            errors.append("VIBE_COMPLETED_HISTORY must be an integer of at least 1")
        if cls.PROGRESS_DETAIL_LIMIT is None or cls.PROGRESS_DETAIL_LIMIT < 1:
            errors.append("VIBE_PROGRESS_DETAIL_LIMIT must be an integer of at least 1")

        if errors:
            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            raise ConfigurationError(error_msg)

        return True
