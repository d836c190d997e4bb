"""
Feedback context logger.

Provides logging interface for the feedback context with automatic [feedback] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[feedback]"


def _log_info(message: str) -> None:
    """Log info message with [feedback] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [feedback] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
