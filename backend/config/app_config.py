"""
Application Configuration

Environment-driven settings for the task manager data layer.

Includes:
- Database URL and engine echo flag
- Log level and log directory
- Password policy used by the request DTOs
"""
import os
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

APP_HOME = Path.home() / ".task_manager"

_TRUE_VALUES = ('true', '1', 'yes')


def env_flag(name: str, default: bool = False) -> bool:
    """
    Read a boolean flag from the environment.

    Returns:
        True if the variable is set to 'true', '1' or 'yes' (case-insensitive)
    """
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


def env_int(name: str, default: int, minimum: int | None = None) -> int:
    """
    Read an integer from the environment.

    Args:
        name: Variable name
        default: Value used when unset, not an integer, or below minimum
        minimum: Smallest accepted value
    """
    raw = os.environ.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={raw!r}, using {default}")
        return default
    if minimum is not None and value < minimum:
        logger.warning(f"Ignoring {name}={value} below minimum {minimum}, using {default}")
        return default
    return value


def get_database_url() -> str:
    return os.environ.get('TASKS_DATABASE_URL', f"sqlite:///{APP_HOME / 'tasks.db'}")


def get_log_dir() -> Path:
    return Path(os.environ.get('TASKS_LOG_DIR', str(APP_HOME / 'logs')))


DATABASE_URL = get_database_url()
DB_ECHO = env_flag('TASKS_DB_ECHO')
LOG_LEVEL = os.environ.get('TASKS_LOG_LEVEL', 'INFO').upper()
LOG_DIR = get_log_dir()
# Floor for TASKS_PASSWORD_MIN_LENGTH
MIN_PASSWORD_LENGTH = 8
PASSWORD_MIN_LENGTH = env_int('TASKS_PASSWORD_MIN_LENGTH', MIN_PASSWORD_LENGTH, minimum=MIN_PASSWORD_LENGTH)
