"""Runtime settings, read once from the environment."""
import os

TRUE_FLAGS = ("1", "true", "yes", "on")
FALSE_FLAGS = ("0", "false", "no", "off", "")


def parse_flag(value) -> bool:
    """Accept a real bool or one of the usual on/off spellings. Anything else is a ValueError."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in TRUE_FLAGS:
            return True
        if normalized in FALSE_FLAGS:
            return False
    raise ValueError(f"Not a flag value: {value!r}")


def _env_flag(name, default=False):
    return parse_flag(os.getenv(name, str(default)))


TABLE_CONFIG = {
    "legacy": _env_flag("TRUTHTABLE_LEGACY"),               # swallow malformed -> / <-> like the old tool
    "coarse_errors": _env_flag("TRUTHTABLE_COARSE_ERRORS"),  # single "Invalid expression!" message
    "max_variables": int(os.getenv("TRUTHTABLE_MAX_VARIABLES", "16")),  # API only
    "cache_size": int(os.getenv("TRUTHTABLE_CACHE_SIZE", "100")),
}

SERVER_CONFIG = {
    "host": os.getenv("HOST", "0.0.0.0"),
    "port": int(os.getenv("PORT", "8000")),
    "reload": _env_flag("DEBUG"),
}

LOG_CONFIG = {
    "level": os.getenv("LOG_LEVEL", "INFO").upper(),
}


def validate_config():
    assert TABLE_CONFIG["max_variables"] > 0, "TRUTHTABLE_MAX_VARIABLES must be positive"
    assert TABLE_CONFIG["cache_size"] > 0, "TRUTHTABLE_CACHE_SIZE must be positive"
    assert 0 < SERVER_CONFIG["port"] < 65536, "PORT out of range"
