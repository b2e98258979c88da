"""
Tests for the ysh command line: run, config and about.
"""

import pytest
from typer.testing import CliRunner

from ysh.cli import app


runner = CliRunner()


@pytest.fixture(autouse=True)
def config_home(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))


@pytest.fixture
def script(tmp_path):
    path = tmp_path / "walk.ysh"
    path.write_text(
        "# walk through a small tree\n"
        "mkdir a\n"
        "cd a\n"
        "make f hello world\n"
        "cat f\n"
        "pwd\n"
        "cd ..\n"
        "pwd\n"
    )
    return path


class TestRunCommand:
    """Tests for the run command."""

    def test_run_script(self, script):
        result = runner.invoke(app, ["run", str(script)])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["hello world", "/a", "/"]

    def test_run_with_echo(self, script):
        result = runner.invoke(app, ["run", "--echo", str(script)])

        assert result.exit_code == 0
        assert f"{script}: mkdir a" in result.stdout

    def test_run_from_stdin(self):
        result = runner.invoke(app, ["run", "-"], input="mkdir a\ncd a\npwd\n")

        assert result.exit_code == 0
        assert result.stdout.strip() == "/a"

    def test_scripts_share_one_session(self, tmp_path):
        first = tmp_path / "one.ysh"
        first.write_text("mkdir shared\n")
        second = tmp_path / "two.ysh"
        second.write_text("cd shared\npwd\n")

        result = runner.invoke(app, ["run", str(first), str(second)])

        assert result.exit_code == 0
        assert result.stdout.strip() == "/shared"

    def test_failed_command_sets_exit_code(self, tmp_path):
        path = tmp_path / "bad.ysh"
        path.write_text("cat nothing\n")

        result = runner.invoke(app, ["run", str(path)])

        assert result.exit_code == 1

    def test_exit_status(self, tmp_path):
        path = tmp_path / "exit.ysh"
        path.write_text("exit 3\necho unreachable\n")

        result = runner.invoke(app, ["run", str(path)])

        assert result.exit_code == 3
        assert "unreachable" not in result.stdout

    def test_missing_script(self, tmp_path):
        result = runner.invoke(app, ["run", str(tmp_path / "nope.ysh")])

        assert result.exit_code == 1


class TestConfigCommand:
    """Tests for the config command."""

    def test_show(self):
        result = runner.invoke(app, ["config", "--show"])

        assert result.exit_code == 0
        assert "Shell Settings" in result.stdout

    def test_set_prompt(self):
        from ysh.config import load_config

        result = runner.invoke(app, ["config", "--prompt", "ysh> "])

        assert result.exit_code == 0
        assert load_config().shell.prompt == "ysh> "

    def test_configured_echo_used_by_run(self, tmp_path):
        runner.invoke(app, ["config", "--echo"])
        path = tmp_path / "s.ysh"
        path.write_text("pwd\n")

        result = runner.invoke(app, ["run", str(path)])

        assert result.stdout.splitlines() == [f"{path}: pwd", "/"]

    def test_init(self):
        result = runner.invoke(app, ["config", "--init"])

        assert result.exit_code == 0
        assert "Configuration initialized" in result.stdout

    def test_init_with_non_object_file(self, tmp_path):
        path = tmp_path / "config" / "ysh" / "config.json"
        path.parent.mkdir(parents=True)
        path.write_text("[]")

        result = runner.invoke(app, ["config", "--init"])

        assert result.exit_code == 0


def test_about():
    result = runner.invoke(app, ["about"])

    assert result.exit_code == 0
    assert "mkdir" in result.stdout
