import logging

import pytest

from envfile.config_loader import DEFAULT_CONFIG, load_config
from envfile.errors import ConfigError


def test_defaults_without_config_file(tmp_path):
    assert load_config(str(tmp_path)) == DEFAULT_CONFIG


def test_user_values_override_defaults(tmp_path):
    (tmp_path / ".envfile.yml").write_text(
        "env_file: .env.local\nrequired: [DB_HOST, DB_PORT]\noverload: true\n",
        encoding="utf-8",
    )
    cfg = load_config(str(tmp_path))
    assert cfg["env_file"] == ".env.local"
    assert cfg["dist_file"] == ".env.dist"
    assert cfg["required"] == ["DB_HOST", "DB_PORT"]
    assert cfg["overload"] is True


def test_wrong_types_are_ignored_with_warning(tmp_path, caplog):
    (tmp_path / ".envfile.yml").write_text("required: DB_HOST\noverload: maybe\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="envfile.config_loader"):
        cfg = load_config(str(tmp_path))
    assert cfg["required"] == []
    assert cfg["overload"] is False
    assert "required" in caplog.text


def test_invalid_yaml_raises(tmp_path):
    (tmp_path / ".envfile.yml").write_text("required: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(str(tmp_path))


def test_defaults_are_not_shared(tmp_path):
    cfg = load_config(str(tmp_path))
    cfg["required"].append("X")
    assert DEFAULT_CONFIG["required"] == []
