import json

from molcajete.config import config_path, canonical_id
from molcajete.engine import setup
from molcajete.storage.settings import read_config, configured_plugins

def test_setup_roundtrip_in_home(tmp_path, monkeypatch):
    # isolate config
    monkeypatch.setenv("HOME", str(tmp_path))
    path = config_path()
    assert path == tmp_path / ".claude" / "settings.json"
    assert read_config() is None
    assert configured_plugins() == {}

    res = setup({"git"})
    assert res.success, res.message
    assert path.exists()
    assert read_config()["plugins"] == {"molcajete/git": "latest"}

    res = setup(["Res"])
    assert res.success, res.message
    assert configured_plugins() == {"molcajete/git": "latest", "molcajete/res": "latest"}
    # file is written with 2-space indentation
    assert path.read_text().startswith('{\n  "plugins"')
    assert json.loads(path.read_text()) == read_config()

def test_canonical_id_forms():
    assert canonical_id("git") == "molcajete/git"
    assert canonical_id("  GIT ") == "molcajete/git"
    assert canonical_id("molcajete/git") == "molcajete/git"
    assert canonical_id("Molcajete/Git") == "molcajete/git"
    assert canonical_id("other/tool") == "other/tool"
    assert canonical_id("   ") == ""
