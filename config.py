"""Configuration management for evalprompts."""

import os
import sys

# Define path constants directly to avoid circular imports with utils
# (utils.terminal_ui imports Config, and utils.runtime is in the utils package)
_RUNTIME_DIR = os.path.join(os.path.expanduser("~"), ".evalprompts")
_CONFIG_FILE = os.path.join(_RUNTIME_DIR, "config")

_ENV_PREFIX = "EVALPROMPTS_"

# Default configuration template
_DEFAULT_CONFIG = """\
# evalprompts configuration
# Every key can be overridden with an EVALPROMPTS_<KEY> environment variable.

# How many nested levels of glob expansion are allowed per prompt
MAX_GLOB_DEPTH=1

# Line that separates prompts inside a .txt file
PROMPT_SEPARATOR=---

# Set to true to silence the "prompts without {{variables}}" warning
DISABLE_NO_VARIABLE_WARNING=false

# Interpreters used to run .js / .py prompt functions
NODE_BINARY=node
PYTHON_BINARY=

LOG_LEVEL=DEBUG
THEME=dark
"""


def _load_config(path: str) -> dict[str, str]:
    """Parse a KEY=VALUE config file, skipping comments and blank lines."""
    cfg: dict[str, str] = {}
    if not os.path.isfile(path):
        return cfg
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, _, value = line.partition("=")
            # Strip inline comments (# ...) from the value
            if "#" in value:
                value = value[: value.index("#")]
            cfg[key.strip()] = value.strip()
    return cfg


def ensure_config(path: str | None = None) -> str:
    """Create the config file with defaults if it does not exist yet.

    Returns:
        Path to the config file
    """
    path = path or _CONFIG_FILE
    if not os.path.exists(path):
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(_DEFAULT_CONFIG)
    return path


_cfg = _load_config(_CONFIG_FILE)


def get_setting(key: str, default: str = "") -> str:
    """Look up a setting, preferring EVALPROMPTS_<KEY> over the config file."""
    env_value = os.environ.get(f"{_ENV_PREFIX}{key}")
    if env_value is not None:
        return env_value
    return _cfg.get(key, default)


class Config:
    """Configuration for evalprompts.

    Values are read once at import time. Access them directly via Config.XXX.
    Flags that must react to the environment at call time (such as
    DISABLE_NO_VARIABLE_WARNING) go through utils.envars instead.
    """

    # Prompt resolution
    MAX_GLOB_DEPTH = int(get_setting("MAX_GLOB_DEPTH", "1"))
    PROMPT_SEPARATOR = get_setting("PROMPT_SEPARATOR", "---") or "---"

    # Prompt function runners
    NODE_BINARY = get_setting("NODE_BINARY", "node") or "node"
    PYTHON_BINARY = get_setting("PYTHON_BINARY") or sys.executable

    # Logging Configuration
    # Logging is only enabled with --verbose (see utils.logger)
    LOG_LEVEL = get_setting("LOG_LEVEL", "DEBUG").upper()

    # Terminal output
    THEME = get_setting("THEME", "dark")  # "dark" or "light"

    @classmethod
    def validate(cls):
        """Validate configuration values.

        Raises:
            ValueError: If a value is out of range
        """
        if cls.MAX_GLOB_DEPTH < 0:
            raise ValueError(
                f"MAX_GLOB_DEPTH must be >= 0, got {cls.MAX_GLOB_DEPTH}. "
                "Fix it in ~/.evalprompts/config or EVALPROMPTS_MAX_GLOB_DEPTH."
            )
        if cls.THEME not in ("dark", "light"):
            raise ValueError(f"THEME must be 'dark' or 'light', got '{cls.THEME}'.")
