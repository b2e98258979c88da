"""Tests for configuration loading and saving."""

import json

import pytest

from ysh.config import (
    ShellConfig,
    YshConfig,
    ensure_config_exists,
    get_config_path,
    get_history_path,
    load_config,
    save_config,
    update_config,
)


@pytest.fixture(autouse=True)
def config_home(tmp_path, monkeypatch):
    """Point the config directory at a temporary location."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    return tmp_path


def test_config_path_uses_xdg(config_home):
    assert get_config_path() == config_home / "ysh" / "config.json"


def test_defaults_when_missing():
    config = load_config()
    assert config.shell.prompt == "% "
    assert config.shell.echo is False
    assert config.cli.verbose is False


def test_save_and_load(config_home):
    config = YshConfig(shell=ShellConfig(prompt="> ", echo=True))
    path = save_config(config)

    assert path.exists()
    loaded = load_config()
    assert loaded.shell.prompt == "> "
    assert loaded.shell.echo is True


def test_partial_file_keeps_defaults(config_home):
    path = get_config_path()
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps({"cli": {"color": False}}))

    config = load_config()
    assert config.cli.color is False
    assert config.shell.prompt == "% "


def test_invalid_file_falls_back_to_defaults(config_home):
    path = get_config_path()
    path.parent.mkdir(parents=True)
    path.write_text("{not json")

    assert load_config() == YshConfig()


@pytest.mark.parametrize("content", ["[]", "\"text\"", "3", "null"])
def test_non_object_file_falls_back_to_defaults(config_home, content):
    path = get_config_path()
    path.parent.mkdir(parents=True)
    path.write_text(content)

    assert load_config() == YshConfig()


def test_unknown_keys_fall_back_to_defaults(config_home):
    path = get_config_path()
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps({"shell": {"colour": "blue"}}))

    assert load_config() == YshConfig()


def test_ensure_config_exists():
    path = ensure_config_exists()
    assert json.loads(path.read_text()) == YshConfig().to_dict()


def test_update_config_changes_only_given_values():
    update_config(shell_prompt="$ ")
    update_config(cli_verbose=True)

    config = load_config()
    assert config.shell.prompt == "$ "
    assert config.cli.verbose is True
    assert config.shell.echo is False


def test_history_path_default(config_home):
    assert get_history_path(YshConfig()) == config_home / "ysh" / "history"


def test_history_path_configured(tmp_path):
    config = YshConfig(shell=ShellConfig(history_file=str(tmp_path / "h")))
    assert get_history_path(config) == tmp_path / "h"
