"""
migrate.py
Conversion helpers between env files and json/yaml.
"""
import json
import re

import yaml

from .loader import Loader

# values made only of these characters are written unquoted
_BARE_VALUE = re.compile(r"[A-Za-z0-9_\-.,:/@+=%~*!?^&|<>()\[\]{}';`]*")
_QUOTE_ESCAPES = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("$", "\\$"),
    ("\n", "\\n"),
    ("\r", "\\r"),
)


def quote_value(value: str) -> str:
    if _BARE_VALUE.fullmatch(value) and not value.startswith("'"):
        return value
    for raw, escaped in _QUOTE_ESCAPES:
        value = value.replace(raw, escaped)
    return f'"{value}"'


def dump_env(env: dict) -> str:
    return "".join(f"{k}={quote_value(v)}\n" for k, v in env.items())


def read_env(path: str) -> dict:
    # a bare Loader: parse only, the environment is never touched
    return Loader(path).get_bucket()


def write_env(env: dict, path: str):
    with open(path, "w", encoding="utf-8") as f:
        f.write(dump_env(env))


def _flatten_scalars(data, src: str) -> dict:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{src} must contain a flat mapping of names to values.")

    env = {}
    for k, v in data.items():
        if isinstance(v, (dict, list)):
            raise ValueError(f"{src}: value for '{k}' is nested; only scalar values can be written to an env file.")
        if isinstance(v, bool):
            v = "true" if v else "false"
        elif v is None:
            v = ""
        env[str(k)] = str(v)
    return env


def read_json(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return _flatten_scalars(json.load(f), path)


def write_json(env: dict, path: str):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(env, f, indent=2, ensure_ascii=False)


def read_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return _flatten_scalars(yaml.safe_load(f), path)


def write_yaml(env: dict, path: str):
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(env, f, default_flow_style=False, sort_keys=False, allow_unicode=True)


# High-level convenience:
def env_to_json(src: str, dst: str):
    write_json(read_env(src), dst)


def env_to_yaml(src: str, dst: str):
    write_yaml(read_env(src), dst)


def json_to_env(src: str, dst: str):
    write_env(read_json(src), dst)


def yaml_to_env(src: str, dst: str):
    write_env(read_yaml(src), dst)
