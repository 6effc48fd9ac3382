import logging
import os
from functools import lru_cache

import yaml

from clawion.lib import paths

DEFAULT_CONFIG = {
    "log_level": "WARNING",
    "ui": {"host": "127.0.0.1", "port": 3000},
}

LOG_LEVEL_ENV = "CLAWION_LOG_LEVEL"
LOG_FORMAT = "[clawion] %(levelname)s %(name)s: %(message)s"


def _validate_config(cfg: dict) -> None:
    """Validate config structure. Fail fast on invalid types."""
    if not isinstance(cfg, dict):
        raise ValueError(f"Config must be a dict, got {type(cfg).__name__}")

    if "ui" in cfg and not isinstance(cfg.get("ui"), dict):
        raise ValueError("Config 'ui' must be a dict")


def clear_cache():
    load_config.cache_clear()


@lru_cache(maxsize=1)
def load_config() -> dict:
    """Load config.yaml from the workspace root, merged over defaults."""
    cfg = {"log_level": DEFAULT_CONFIG["log_level"], "ui": dict(DEFAULT_CONFIG["ui"])}
    path = paths.config_file()
    if path.exists():
        with open(path) as f:
            user_cfg = yaml.safe_load(f) or {}
        _validate_config(user_cfg)
        if "log_level" in user_cfg:
            cfg["log_level"] = str(user_cfg["log_level"])
        cfg["ui"].update(user_cfg.get("ui") or {})

    env_level = os.environ.get(LOG_LEVEL_ENV, "").strip()
    if env_level:
        cfg["log_level"] = env_level
    return cfg


def log_level() -> int:
    name = str(load_config()["log_level"]).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def setup_logging() -> None:
    logging.basicConfig(level=log_level(), format=LOG_FORMAT)
