from functools import lru_cache

import yaml

from . import paths

LONG_LINE_POLICIES = ("keep", "truncate")

DEFAULTS = {
    "file": paths.DEFAULT_TODO_FILE,
    "max_line_length": 255,
    "long_lines": "keep",
    "log_level": "WARNING",
}


def _validate_config(cfg) -> None:
    """Validate config structure. Fail fast on invalid types."""
    if not isinstance(cfg, dict):
        raise ValueError(f"Config must be a dict, got {type(cfg).__name__}")

    if "max_line_length" in cfg:
        limit = cfg["max_line_length"]
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise ValueError("Config 'max_line_length' must be a positive integer")

    if "long_lines" in cfg and cfg["long_lines"] not in LONG_LINE_POLICIES:
        raise ValueError(
            f"Config 'long_lines' must be one of {', '.join(LONG_LINE_POLICIES)}"
        )


def clear_cache():
    load_config.cache_clear()


@lru_cache(maxsize=1)
def load_config() -> dict:
    """Load the config.yaml file, returning its content or an empty dict if not found."""
    path = paths.config_file()
    if not path.exists():
        return {}
    with open(path) as f:
        cfg = yaml.safe_load(f) or {}
    _validate_config(cfg)
    return cfg


def settings() -> dict:
    """Defaults overlaid with the user's config file."""
    return {**DEFAULTS, **load_config()}
