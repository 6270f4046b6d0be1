"""
Environment Configuration Helper
================================
Centralized env var loading with fallbacks.
Every tunable of the consensus engine and its boundary providers lives here.
"""

import os
import logging
from typing import Optional, Any

logger = logging.getLogger(__name__)


def get_env(*names: str, default: Any = None) -> Optional[str]:
    """
    Get environment variable with fallback names.

    Tries each name in order, returns first non-empty value.

    Example:
        get_env("ESPN_API_BASE", "SCORES_API_BASE")

    Args:
        *names: Variable names to try in order
        default: Default value if none found

    Returns:
        First non-empty value found, or default
    """
    for name in names:
        value = os.getenv(name)
        if value and str(value).strip():
            return value.strip()
    return default


def get_env_bool(name: str, default: bool = False) -> bool:
    """Get boolean env var (true/false/1/0)."""
    value = os.getenv(name, "").lower().strip()
    if value in ("true", "1", "yes", "on"):
        return True
    if value in ("false", "0", "no", "off"):
        return False
    return default


def get_env_int(name: str, default: int) -> int:
    """Get integer env var, falling back to default on garbage."""
    value = get_env(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Invalid integer for %s=%r, using %d", name, value, default)
        return default


# ============================================================================
# CENTRALIZED CONFIG (loaded once at import)
# ============================================================================

class Config:
    """Centralized configuration from env vars."""

    ENGINE_VERSION = "1.4"
    TIMEZONE = "America/New_York"

    # Logging
    LOG_LEVEL = get_env("LOG_LEVEL", default="INFO").upper()
    LOG_FORMAT = get_env("LOG_FORMAT", default="json").lower()

    # Consensus
    MIN_CAPPERS = max(2, get_env_int("CONSENSUS_MIN_CAPPERS", 2))

    # Boundary caches (seconds)
    SCHEDULE_CACHE_TTL = get_env_int("SCHEDULE_CACHE_TTL_SECONDS", 30 * 60)
    SCORES_CACHE_TTL = get_env_int("SCORES_CACHE_TTL_SECONDS", 60 * 60)

    # Network
    HTTP_TIMEOUT = get_env_int("HTTP_TIMEOUT_SECONDS", 10)
    SOURCE_TIMEOUT = get_env_int("SOURCE_TIMEOUT_SECONDS", 20)
    ESPN_API_BASE = get_env(
        "ESPN_API_BASE",
        default="https://site.api.espn.com/apis/site/v2/sports",
    )

    # Secondary schedule filter (fails open when ESPN is unreachable)
    ENABLE_SCHEDULE_FILTER = get_env_bool("ENABLE_SCHEDULE_FILTER", True)

    @classmethod
    def log_status(cls):
        """Log config status at boot."""
        status = {
            "version": cls.ENGINE_VERSION,
            "tz": cls.TIMEZONE,
            "min_cappers": cls.MIN_CAPPERS,
            "schedule_ttl": cls.SCHEDULE_CACHE_TTL,
            "scores_ttl": cls.SCORES_CACHE_TTL,
            "http_timeout": cls.HTTP_TIMEOUT,
            "source_timeout": cls.SOURCE_TIMEOUT,
            "schedule_filter": cls.ENABLE_SCHEDULE_FILTER,
            "log_format": cls.LOG_FORMAT,
        }

        status_str = " ".join(f"{k}={v}" for k, v in status.items())
        logger.info(f"ENV OK: {status_str}")

        return status
