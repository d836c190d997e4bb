"""
Progress context logger.

Provides logging interface for the progress context with automatic [progress] prefix.
All progress modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from studymate.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[progress]"


def setup_progress_logger(log_dir: Path, catalog_path: Path = None) -> Path:
    """
    Setup logger for a progress reporting session.

    Args:
        log_dir: Directory for this session
        catalog_path: Catalog file recorded in the provenance header

    Returns:
        Path to log file

    Example:
        from studymate.contexts.progress.logger import setup_progress_logger

        log_file = setup_progress_logger(log_dir, catalog_path=Path("data/catalog.yaml"))
    """
    return _setup_logger(
        context_name="progress",
        log_dir=log_dir,
        extra_provenance={"Catalog": catalog_path} if catalog_path else None,
    )


def _log_info(message: str) -> None:
    """Log info message with [progress] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")
