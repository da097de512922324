import json

import pytest
import yaml

from envfile import migrate
from envfile.parser import parse


def test_dump_then_parse_returns_same_bucket():
    bucket = {
        "PLAIN": "value",
        "EMPTY": "",
        "SPACES": "two words",
        "HASH": "abc#123",
        "QUOTES": 'say "hi"',
        "DOLLAR": "$HOME/bin",
        "MULTI": "line1\nline2",
        "BACKSLASH": "C:\\temp",
        "URL": "https://user:pw@host:5432/db?x=1",
        "UNICODE": "héllo",
    }
    assert parse(migrate.dump_env(bucket), environ={}) == bucket


def test_simple_values_stay_unquoted():
    assert migrate.dump_env({"A": "1", "B": "x.y-z"}) == "A=1\nB=x.y-z\n"
    assert migrate.quote_value("a b") == '"a b"'


def test_env_to_json_and_yaml(tmp_path):
    src = tmp_path / ".env"
    src.write_text('A=1\nB="x y"\n', encoding="utf-8")

    migrate.env_to_json(str(src), str(tmp_path / "out.json"))
    migrate.env_to_yaml(str(src), str(tmp_path / "out.yaml"))

    assert json.loads((tmp_path / "out.json").read_text(encoding="utf-8")) == {"A": "1", "B": "x y"}
    assert yaml.safe_load((tmp_path / "out.yaml").read_text(encoding="utf-8")) == {"A": "1", "B": "x y"}


def test_yaml_to_env_stringifies_scalars(tmp_path):
    src = tmp_path / "in.yaml"
    src.write_text("PORT: 8080\nDEBUG: true\nNAME: app\nNOTHING:\n", encoding="utf-8")
    dst = tmp_path / ".env"

    migrate.yaml_to_env(str(src), str(dst))

    assert parse(dst.read_text(encoding="utf-8")) == {
        "PORT": "8080",
        "DEBUG": "true",
        "NAME": "app",
        "NOTHING": "",
    }


def test_json_to_env_rejects_nested_values(tmp_path):
    src = tmp_path / "in.json"
    src.write_text(json.dumps({"A": "1", "DB": {"host": "x"}}), encoding="utf-8")
    with pytest.raises(ValueError):
        migrate.json_to_env(str(src), str(tmp_path / ".env"))
