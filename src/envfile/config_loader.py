# src/envfile/config_loader.py
import logging
import os

import yaml

from .errors import ConfigError
from .paths import DEFAULT_DIST_FILE, DEFAULT_ENV_FILE

log = logging.getLogger(__name__)

CONFIG_FILENAME = ".envfile.yml"

DEFAULT_CONFIG = {
    "env_file": DEFAULT_ENV_FILE,
    "dist_file": DEFAULT_DIST_FILE,
    "required": [],
    "overload": False,
}

_EXPECTED_TYPES = {
    "env_file": str,
    "dist_file": str,
    "required": list,
    "overload": bool,
}


def load_config(directory: str) -> dict:
    """
    Load .envfile.yml from directory (if present) and merge it over the defaults.
    Returns a dict with keys: env_file, dist_file, required, overload.
    """
    cfg = {k: (list(v) if isinstance(v, list) else v) for k, v in DEFAULT_CONFIG.items()}
    path = os.path.join(directory, CONFIG_FILENAME)
    if not os.path.exists(path):
        return cfg

    try:
        with open(path, "r", encoding="utf-8") as fh:
            user = yaml.safe_load(fh) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(user, dict):
        raise ConfigError(f"{path} must contain a mapping at the top level.")

    for key, expected in _EXPECTED_TYPES.items():
        if key not in user:
            continue
        value = user[key]
        if not isinstance(value, expected):
            log.warning("Ignoring '%s' in %s: expected %s, got %s",
                        key, path, expected.__name__, type(value).__name__)
            continue
        if key == "required":
            value = [str(v) for v in value]
        cfg[key] = value

    return cfg
