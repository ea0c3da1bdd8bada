# config.py
import logging
import os

from dotenv import load_dotenv

# Load .env (if present)
load_dotenv()

DEFAULT_TIMEOUT = 10.0
DEFAULT_DB_FILE = "mobility.db"


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


def get_backend_url():
    """Base URL of the REST backend, without trailing slash, or None if unset."""
    value = os.getenv("BACKEND_URL", "").strip()
    return value.rstrip("/") or None


def get_request_timeout():
    raw = os.getenv("REQUEST_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"REQUEST_TIMEOUT must be a number, got {raw!r}")


def get_database_file():
    return os.getenv("DATABASE_FILE", DEFAULT_DB_FILE)


def configure_logging(level=None):
    level = level or os.getenv("LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
