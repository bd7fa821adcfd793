"""
Database and query configuration.

Settings are read from SCHOOLAPP_* environment variables once, at import time.

Includes:
- Database URL and SQL echo flag
- Strict criteria mode (malformed ranges raise instead of being skipped)
- Default and maximum page sizes for criteria searches
"""
import os
import logging
from pathlib import Path

from constants import PageDefaults

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path.home() / ".schoolapp" / "schoolapp.db"


def _env_flag(name: str, default: str = 'false') -> bool:
    """
    Read a boolean flag from the environment.

    Returns:
        True if the variable is 'true', '1' or 'yes' (case-insensitive)
    """
    return os.environ.get(name, default).strip().lower() in ('true', '1', 'yes')


def _env_int(name: str, default: int) -> int:
    """Read a positive integer from the environment, falling back to default."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={raw!r}, using {default}")
        return default
    if value < 1:
        logger.warning(f"Ignoring non-positive {name}={value}, using {default}")
        return default
    return value


def get_database_url() -> str:
    """
    Get the SQLAlchemy database URL.

    Falls back to a SQLite file in the user's home directory.
    """
    return os.environ.get('SCHOOLAPP_DATABASE_URL', f"sqlite:///{DEFAULT_DB_PATH}")


DATABASE_URL = get_database_url()
SQL_ECHO = _env_flag('SCHOOLAPP_SQL_ECHO')
STRICT_CRITERIA = _env_flag('SCHOOLAPP_STRICT_CRITERIA')
DEFAULT_PAGE_SIZE = _env_int('SCHOOLAPP_DEFAULT_PAGE_SIZE', PageDefaults.SIZE)
MAX_PAGE_SIZE = _env_int('SCHOOLAPP_MAX_PAGE_SIZE', PageDefaults.MAX_SIZE)

if STRICT_CRITERIA:
    logger.info("Strict criteria mode ENABLED: malformed ranges raise InvalidCriteriaError")
