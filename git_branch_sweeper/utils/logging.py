"""Logging setup for git-branch-sweeper.

Diagnostics (warnings about skipped scopes, per-branch classification
decisions, git commands in debug mode) go through the standard logging
module to stderr. Operator-facing output is printed by DisplayService.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

LOG_DIR_NAME = '.git-branch-sweeper'
LOG_FILE_NAME = 'git-branch-sweeper.log'
PACKAGE_PREFIXES = ('git_branch_sweeper.', 'services.')

DEBUG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEBUG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
SHORT_FORMAT = '[%(name)s] %(message)s'


class LevelColorFormatter(logging.Formatter):
    """Prefixes warnings and errors with their level, colored when the stream is a terminal."""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',
        logging.INFO: '\033[32m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[35m',
    }
    RESET = '\033[0m'

    def __init__(self, fmt: str, datefmt: Optional[str] = None, stream: Optional[TextIO] = None):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.stream = stream or sys.stderr

    def _use_color(self) -> bool:
        isatty = getattr(self.stream, 'isatty', None)
        return bool(isatty and isatty())

    def format(self, record):
        message = super().format(record)
        if record.levelno < logging.WARNING:
            return message
        label = record.levelname
        if self._use_color():
            label = f"{self.LEVEL_COLORS.get(record.levelno, '')}{label}{self.RESET}"
        return f"{label}: {message}"


def get_log_file() -> Path:
    """Location of the debug log file."""
    return Path.home() / LOG_DIR_NAME / LOG_FILE_NAME


def setup_logging(verbose: bool = False, debug: bool = False, stream: Optional[TextIO] = None) -> None:
    """
    Configure the root logger for one run.

    Args:
        verbose: Show INFO messages (classification decisions)
        debug: Show DEBUG messages with timestamps and also write them to the log file
        stream: Console stream, stderr by default
    """
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    stream = stream or sys.stderr

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream)
    console_handler.setLevel(level)
    if debug:
        console_handler.setFormatter(LevelColorFormatter(DEBUG_FORMAT, DEBUG_DATE_FORMAT, stream))
    else:
        console_handler.setFormatter(LevelColorFormatter(SHORT_FORMAT, stream=stream))
    root_logger.addHandler(console_handler)

    if debug:
        log_file = get_log_file()
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, mode='w')
        except OSError as e:
            root_logger.warning(f"Could not open log file {log_file}: {e}")
            return
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(DEBUG_FORMAT, DEBUG_DATE_FORMAT))
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the package prefix stripped from its name.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance, e.g. "merge_classifier" for
        git_branch_sweeper.services.merge_classifier
    """
    for prefix in PACKAGE_PREFIXES:
        if name.startswith(prefix):
            name = name[len(prefix):]
    return logging.getLogger(name)
