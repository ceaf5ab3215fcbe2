import json

import pytest
from click.testing import CliRunner

from molcajete.main import cli


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


def _settings(home):
    return home / ".claude" / "settings.json"


def test_setup_command(home):
    runner = CliRunner()
    result = runner.invoke(cli, ["setup", "git", "res"])
    assert result.exit_code == 0, result.output
    assert "Configured 2 plugins" in result.output
    assert json.loads(_settings(home).read_text()) == {
        "plugins": {"molcajete/git": "latest", "molcajete/res": "latest"}
    }


def test_setup_command_fails_on_malformed(home):
    path = _settings(home)
    path.parent.mkdir(parents=True)
    path.write_text("{oops")
    result = CliRunner().invoke(cli, ["setup", "git"])
    assert result.exit_code == 1
    assert "Setup failed" in result.output
    assert path.read_text() == "{oops"


def test_setup_interactive(home):
    result = CliRunner().invoke(cli, ["setup"], input="git, res\n")
    assert result.exit_code == 0, result.output
    assert "No plugins configured yet." in result.output
    plugins = json.loads(_settings(home).read_text())["plugins"]
    assert set(plugins) == {"molcajete/git", "molcajete/res"}


def test_setup_interactive_nothing_selected(home):
    result = CliRunner().invoke(cli, ["setup"], input="\n")
    assert result.exit_code == 0
    assert "Nothing selected" in result.output
    assert not _settings(home).exists()


def test_plugins_command(home):
    runner = CliRunner()
    result = runner.invoke(cli, ["plugins"])
    assert result.exit_code == 0
    assert "No plugins configured" in result.output

    runner.invoke(cli, ["setup", "git"])
    result = runner.invoke(cli, ["plugins"])
    assert result.exit_code == 0
    assert "molcajete/git" in result.output
    assert "Total: 1 plugins" in result.output


def test_plugins_command_malformed(home):
    path = _settings(home)
    path.parent.mkdir(parents=True)
    path.write_text("[]")
    result = CliRunner().invoke(cli, ["plugins"])
    assert result.exit_code == 1
    assert "malformed" in result.output


def test_config_path_command(home):
    result = CliRunner().invoke(cli, ["config-path"])
    assert result.exit_code == 0
    assert result.output.strip() == str(_settings(home))


def test_dev_bump_command(tmp_path):
    manifest = tmp_path / "plugin.json"
    manifest.write_text('{\n  "name": "molcajete",\n  "version": "1.4.9"\n}\n')
    result = CliRunner().invoke(cli, ["dev", "bump", "minor", "--file", str(manifest)])
    assert result.exit_code == 0, result.output
    assert "1.4.9 -> 1.5.0" in result.output
    assert '"version": "1.5.0"' in manifest.read_text()


def test_dev_bump_missing_manifest(tmp_path):
    result = CliRunner().invoke(cli, ["dev", "bump", "--file", str(tmp_path / "missing.json")])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_dev_plugin_dir_command(tmp_path):
    skills = tmp_path / "cache" / "market" / "res" / "2.0.1" / "skills"
    skills.mkdir(parents=True)
    runner = CliRunner()
    result = runner.invoke(cli, ["dev", "plugin-dir", "res", "--cache", str(tmp_path / "cache")])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == str(skills.parent)

    result = runner.invoke(cli, ["dev", "plugin-dir", "git", "--cache", str(tmp_path / "cache")])
    assert result.exit_code == 1
    assert "not found" in result.output
