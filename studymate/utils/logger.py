"""
Session logging for the StudyMate CLI scripts.

A session is one script run with --log: it gets its own timestamped directory
under LOGS_PATH holding a single <context>.log file, plus a console echo on
stderr so the report on stdout stays clean.

Sink levels come from the environment (.env is honoured):
    STUDYMATE_LOG_FILE_LEVEL     default DEBUG
    STUDYMATE_LOG_CONSOLE_LEVEL  default INFO

Context-specific wrappers are defined in contexts/{context}/logger.py.
"""

import os
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from loguru import logger

from studymate import __version__

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | {message}"


@dataclass(frozen=True)
class LogSettings:
    """Sink levels for a logging session."""

    file_level: str = "DEBUG"
    console_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "LogSettings":
        return cls(
            file_level=os.getenv("STUDYMATE_LOG_FILE_LEVEL", cls.file_level).upper(),
            console_level=os.getenv("STUDYMATE_LOG_CONSOLE_LEVEL", cls.console_level).upper(),
        )


def session_dir(logs_root: Path, context_name: str, now: Optional[datetime] = None) -> Path:
    """
    Directory for one logging session, e.g. outs/logs/progress_20261018_123456.
    """
    now = now or datetime.now()
    return Path(logs_root) / f"{context_name}_{now:%Y%m%d_%H%M%S}"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Mapping[str, Any]] = None,
    settings: Optional[LogSettings] = None,
) -> Path:
    """
    Route loguru output to a session file and the console.

    Any previously configured sinks are removed first, so calling this twice
    in one process starts a fresh session.

    Args:
        context_name: Context identifier (e.g., "progress", "profile"); names the log file
        log_dir: Directory for this logging session (created if missing)
        extra_provenance: Additional key-value pairs for the session header
        settings: Sink levels; read from the environment when omitted

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            "progress",
            session_dir(LOGS_PATH, "progress"),
            extra_provenance={"Catalog": "data/catalog.yaml"},
        )
    """
    settings = settings or LogSettings.from_env()
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level=settings.file_level)
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=settings.console_level, colorize=True)

    log_session_header(context_name, settings, extra_provenance)

    return log_file


def log_session_header(
    context_name: str,
    settings: LogSettings,
    extra_provenance: Optional[Mapping[str, Any]] = None,
) -> None:
    """Write the session header: command line, versions and any extra provenance."""
    logger.info("-" * 60)
    logger.info(f"studymate {__version__} | {context_name} session")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")
    logger.debug(f"Levels: file={settings.file_level} console={settings.console_level}")

    for key, value in (extra_provenance or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("-" * 60)
