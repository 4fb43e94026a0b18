"""Runtime directory management for evalprompts.

All runtime data is stored under ~/.evalprompts/ directory:
- config: Configuration file (created by ensure_runtime_dirs on first CLI run)
- logs/: Log files (only created with --verbose)
"""

import os

RUNTIME_DIR = os.path.join(os.path.expanduser("~"), ".evalprompts")


def get_config_file() -> str:
    """Get the configuration file path.

    Returns:
        Path to ~/.evalprompts/config
    """
    return os.path.join(RUNTIME_DIR, "config")


def get_log_dir() -> str:
    """Get the log directory path.

    Returns:
        Path to ~/.evalprompts/logs/
    """
    return os.path.join(RUNTIME_DIR, "logs")


def ensure_runtime_dirs(create_logs: bool = False) -> None:
    """Ensure runtime directories and the default config file exist.

    Args:
        create_logs: Whether to create the logs directory (for --verbose mode)
    """
    from config import ensure_config

    os.makedirs(RUNTIME_DIR, exist_ok=True)
    ensure_config(get_config_file())

    if create_logs:
        os.makedirs(get_log_dir(), exist_ok=True)
