"""Environment flag lookup.

Flags are read at call time so that toggling an environment variable affects
the next call without re-importing config.
"""

from config import get_setting

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def get_env_string(key: str, default: str = "") -> str:
    """Return EVALPROMPTS_<key> from the environment or the config file."""
    return get_setting(key, default)


def get_env_bool(key: str, default: bool = False) -> bool:
    """Return EVALPROMPTS_<key> interpreted as a boolean.

    Unrecognised values fall back to ``default``.
    """
    value = get_setting(key, "").strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY and value:
        return False
    return default
