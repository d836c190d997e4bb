"""
Profile context logger.

Provides logging interface for the profile context with automatic [profile] prefix.
All profile modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from studymate.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[profile]"


def setup_profile_logger(log_dir: Path, profile_path: Path = None) -> Path:
    """
    Setup logger for a profile scoring session.

    Args:
        log_dir: Directory for this session
        profile_path: Profile file recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="profile",
        log_dir=log_dir,
        extra_provenance={"Profile": profile_path} if profile_path else None,
    )


def _log_info(message: str) -> None:
    """Log info message with [profile] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [profile] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
