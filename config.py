"""
Config - Environment-driven settings for the tutor gateway.

Values are read from the process environment (and a local .env file, if one
exists) once at import time. Everything has a default so the server runs
with no configuration at all.
"""

import os
import logging
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()


class ConfigError(Exception):
    """Raised when an environment variable holds an unusable value."""
    pass


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")


def _get_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


# ==================== Server ====================

HOST = os.getenv("HOST", "127.0.0.1")
PORT = _get_int("PORT", 3333)
CORS_ORIGINS = _get_list("CORS_ORIGINS", "*")

# ==================== Logging ====================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

# ==================== Content Tables ====================

DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "core" / "data"
DATA_DIR = Path(os.getenv("CURRICULUM_DATA_DIR") or DEFAULT_DATA_DIR)

# ==================== Guardrail Thresholds ====================
# Heuristic constants for the solution-dump detector.

GUARDRAIL_MIN_CODE_FENCES = _get_int("GUARDRAIL_MIN_CODE_FENCES", 2)
GUARDRAIL_FENCED_LINE_LIMIT = _get_int("GUARDRAIL_FENCED_LINE_LIMIT", 60)
GUARDRAIL_LONG_LINE_LIMIT = _get_int("GUARDRAIL_LONG_LINE_LIMIT", 120)
GUARDRAIL_CODE_RATIO = _get_float("GUARDRAIL_CODE_RATIO", 0.35)


def configure_logging(level: Optional[str] = None):
    """Set up root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL), logging.INFO),
        format=LOG_FORMAT,
    )
