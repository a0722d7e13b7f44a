"""
Logging setup.

Library modules only create loggers (logging.getLogger(__name__)); they never
configure handlers. Applications and scripts call setup_logging() once.
"""

import logging
from typing import Optional

from date_tasks.config.settings import LOG_LEVELS, get_log_level_number, get_settings


def setup_logging(log_level: Optional[str] = None) -> logging.Logger:
    """
    Configure root logging with a timestamped format.

    Args:
        log_level: Level name (e.g. "DEBUG"). Defaults to the configured
                   DATE_TASKS_LOG_LEVEL.

    Returns:
        The package logger.

    Raises:
        ValueError: If log_level is not a standard level name.
    """
    level_name = (log_level or get_settings().log_level).upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(
            f"log_level must be one of {', '.join(LOG_LEVELS)}, got: {log_level}"
        )

    logging.basicConfig(
        level=get_log_level_number(level_name),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    logger = logging.getLogger("date_tasks")
    logger.setLevel(get_log_level_number(level_name))
    return logger
