# src/config.py
import logging
import os

logger = logging.getLogger(__name__)


def _env_int(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid integer for %s=%r, using %s", name, raw, default)
        return default


def _env_bool(name, default=False):
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_settings():
    """Read PHISHGUARD_* environment variables into a plain dict."""
    origins = os.getenv("PHISHGUARD_CORS_ORIGINS") or "*"
    return {
        "host": os.getenv("PHISHGUARD_HOST") or "127.0.0.1",
        "port": _env_int("PHISHGUARD_PORT", 5000),
        "debug": _env_bool("PHISHGUARD_DEBUG"),
        "log_level": (os.getenv("PHISHGUARD_LOG_LEVEL") or "INFO").upper(),
        "cors_origins": [o.strip() for o in origins.split(",") if o.strip()] or ["*"],
        "feed_max_events": _env_int("PHISHGUARD_FEED_MAX_EVENTS", 50),
        "feed_initial_events": _env_int("PHISHGUARD_FEED_INITIAL_EVENTS", 10),
    }
