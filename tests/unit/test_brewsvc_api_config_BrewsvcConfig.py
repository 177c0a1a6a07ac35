"""Unit tests for brewsvc.api.config.BrewsvcConfig."""

import json
from pathlib import Path

import pytest

from brewsvc.api.config.BrewsvcConfig import BrewsvcConfig


def test_get_home_dir_from_env(brewsvc_home):
    assert BrewsvcConfig.get_home_dir() == brewsvc_home.resolve()
    assert BrewsvcConfig.get_config_path() == brewsvc_home.resolve() / "config.json"


def test_get_home_dir_default(monkeypatch, tmp_path):
    monkeypatch.delenv("BREWSVC_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert BrewsvcConfig.get_home_dir() == tmp_path / ".brewsvc"


def test_load(brewsvc_config, prefix):
    config = BrewsvcConfig.load()
    assert config.prefix == prefix
    assert config.formula_dir == Path(brewsvc_config["formula_dir"])
    assert config.log_level == "INFO"


def test_load_missing_file(brewsvc_home):
    with pytest.raises(ValueError, match="Configuration file not found"):
        BrewsvcConfig.load()


def test_load_invalid_json(brewsvc_home):
    (brewsvc_home / "config.json").write_text("{")
    with pytest.raises(ValueError, match="Invalid JSON in config file"):
        BrewsvcConfig.load()


def test_load_not_an_object(brewsvc_home):
    (brewsvc_home / "config.json").write_text("[]")
    with pytest.raises(ValueError, match="must contain a JSON object"):
        BrewsvcConfig.load()


def test_load_missing_field(brewsvc_home):
    (brewsvc_home / "config.json").write_text(json.dumps({"prefix": "/opt/homebrew"}))
    with pytest.raises(ValueError, match="Configuration validation error: formula_dir"):
        BrewsvcConfig.load()


def test_load_unknown_field(brewsvc_config, brewsvc_home):
    (brewsvc_home / "config.json").write_text(json.dumps({**brewsvc_config, "colour": "blue"}))
    with pytest.raises(ValueError, match="colour"):
        BrewsvcConfig.load()


def test_homebrew_prefix_overrides(brewsvc_config, monkeypatch):
    monkeypatch.setenv("HOMEBREW_PREFIX", "/home/linuxbrew/.linuxbrew")
    assert BrewsvcConfig.load().prefix == Path("/home/linuxbrew/.linuxbrew")


def test_paths_expand_user(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    config = BrewsvcConfig(prefix="~/brew", formula_dir="~/formulae")
    assert config.prefix == tmp_path / "brew"
    assert config.formula_dir == tmp_path / "formulae"


def test_log_level_normalized():
    assert BrewsvcConfig(prefix="/p", formula_dir="/f", log_level="debug").log_level == "DEBUG"


def test_log_level_invalid():
    with pytest.raises(ValueError, match="log_level"):
        BrewsvcConfig(prefix="/p", formula_dir="/f", log_level="loud")


def test_to_dict():
    config = BrewsvcConfig(prefix="/opt/homebrew", formula_dir="/etc/brewsvc/formulae")
    assert config.to_dict() == {
        "prefix": "/opt/homebrew",
        "formula_dir": "/etc/brewsvc/formulae",
        "log_level": "INFO",
    }
