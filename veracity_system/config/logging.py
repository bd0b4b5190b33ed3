"""Loguru configuration for the scoring components.

Estimators log per-source decisions at DEBUG through a component-bound
logger. All output goes to stderr so `veracity score --json` keeps stdout
clean for the report.
"""

import sys
from typing import Optional

from loguru import logger

from veracity_system.config.settings import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[component]}</cyan> | <level>{message}</level>"
)


def configure_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Configure loguru from settings, with optional overrides.

    Behavior:
    - TTY + console format: colorized, human-readable lines
    - Otherwise: one JSON object per record
    - Records without a bound component are tagged "veracity"

    Args:
        level: Overrides LOG_LEVEL
        log_format: Overrides LOG_FORMAT ("json" or "console")
    """
    logger.remove()
    logger.configure(extra={"component": "veracity"})

    level = (level or settings.log_level).upper()
    use_console_format = (log_format or settings.log_format).lower() == "console"

    if sys.stderr.isatty() and use_console_format:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)
    else:
        logger.add(
            sys.stderr,
            format="{message}",
            level=level,
            serialize=True,
            diagnose=False,
        )


def get_logger(component: str):
    """
    Logger bound to a component name.

    Example:
        >>> log = get_logger("CredibilityEstimator")
        >>> log.debug("Credibility 0.80 for britannica.com")
    """
    return logger.bind(component=component)


configure_logging()

__all__ = ["logger", "get_logger", "configure_logging"]
