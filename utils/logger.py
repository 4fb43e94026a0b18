"""Logging setup for the evalprompts CLI.

The prompt modules only ever call get_logger(); handlers are attached here,
once, when the CLI runs with --verbose.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from .runtime import get_log_dir

_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
# Console lines sit next to rich output, so they stay short
_CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"

_log_file_path: Optional[str] = None


def setup_logger(
    log_dir: Optional[str] = None,
    log_level: Optional[str] = None,
    log_to_console: bool = False,
) -> Optional[str]:
    """Send prompt-resolution records to a timestamped log file.

    Glob expansions, literal fallbacks and skipped extensions are logged at
    DEBUG; the "prompts without variables" summary is a WARNING. With
    ``log_to_console`` warnings are also echoed to stderr. Calling this again
    is a no-op.

    Args:
        log_dir: Directory for log files (default: ~/.evalprompts/logs/)
        log_level: Level name; defaults to Config.LOG_LEVEL
        log_to_console: Also echo warnings to the console

    Returns:
        Path of the log file
    """
    global _log_file_path

    if _log_file_path is not None:
        return _log_file_path

    if log_level is None:
        from config import Config

        log_level = Config.LOG_LEVEL
    level = getattr(logging, log_level.upper(), logging.DEBUG)

    log_path = Path(log_dir or get_log_dir())
    log_path.mkdir(exist_ok=True, parents=True)
    log_file = log_path / f"evalprompts_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logging.root.addHandler(file_handler)
    logging.root.setLevel(level)

    if log_to_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
        logging.root.addHandler(console_handler)

    _log_file_path = str(log_file)
    logging.getLogger(__name__).info(f"Prompt log started at level {log_level}: {_log_file_path}")
    return _log_file_path


def get_logger(name: str) -> logging.Logger:
    """Logger for a prompt module; silent until setup_logger() or the host configures logging."""
    return logging.getLogger(name)


def get_log_file_path() -> Optional[str]:
    return _log_file_path
