"""Workspace configuration loading."""

import json
import sys

import pytest

from viewforge.config import BuildDefaults, env_log_level, load_workspace_config, locate_config_file
from viewforge.constants import DEFAULT_CONTAINER_ID
from viewforge.errors import ConfigError

requires_tomllib = pytest.mark.skipif(sys.version_info < (3, 11), reason="tomllib requires Python 3.11+")


def test_defaults_without_config(tmp_path):
    config = load_workspace_config(tmp_path)

    assert config.config_path is None
    assert config.build.out_dir == (tmp_path / "build").resolve()
    assert config.build.container_id == DEFAULT_CONTAINER_ID
    assert config.build.clean is True
    assert config.libraries == {}


@requires_tomllib
def test_toml_config(tmp_path):
    (tmp_path / "viewforge.toml").write_text(
        '[build]\nout_dir = "out"\nversion = "2.0.0"\nclean = false\n\n[libraries]\nBootstrap = "reactstrap"\n',
        encoding="utf-8",
    )
    config = load_workspace_config(tmp_path)

    assert config.config_path == tmp_path.resolve() / "viewforge.toml"
    assert config.build.out_dir == (tmp_path / "out").resolve()
    assert config.build.version == "2.0.0"
    assert config.build.clean is False
    assert config.libraries == {"Bootstrap": "reactstrap"}


def test_json_rc_config(tmp_path):
    (tmp_path / ".viewforgerc").write_text(json.dumps({"build": {"url_prefix": "/app"}}), encoding="utf-8")
    config = load_workspace_config(tmp_path)

    assert config.build.url_prefix == "/app"
    assert config.build.version == BuildDefaults.version


@requires_tomllib
def test_toml_takes_precedence_over_rc(tmp_path):
    (tmp_path / "viewforge.toml").write_text("", encoding="utf-8")
    (tmp_path / ".viewforgerc").write_text("{}", encoding="utf-8")
    assert locate_config_file(tmp_path).name == "viewforge.toml"


def test_invalid_json_raises(tmp_path):
    (tmp_path / ".viewforgerc").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_workspace_config(tmp_path)


def test_non_boolean_clean_raises(tmp_path):
    (tmp_path / ".viewforgerc").write_text(json.dumps({"build": {"clean": "yes"}}), encoding="utf-8")
    with pytest.raises(ConfigError, match="clean"):
        load_workspace_config(tmp_path)


def test_libraries_must_be_a_table(tmp_path):
    (tmp_path / ".viewforgerc").write_text(json.dumps({"libraries": ["reactstrap"]}), encoding="utf-8")
    with pytest.raises(ConfigError):
        load_workspace_config(tmp_path)


def test_missing_explicit_config_raises(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_workspace_config(tmp_path, tmp_path / "custom.toml")


def test_env_log_level(monkeypatch):
    monkeypatch.setenv("VIEWFORGE_LOG_LEVEL", "debug")
    assert env_log_level() == "debug"
    monkeypatch.delenv("VIEWFORGE_LOG_LEVEL")
    assert env_log_level() is None
