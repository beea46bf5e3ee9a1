"""Tests for configuration loading."""

import json

from agent_inbox.config import InboxConfig, load_config, save_config


def test_defaults_when_file_missing(tmp_path):
    cfg = load_config(path=tmp_path / "missing.json", env={})
    assert cfg == InboxConfig()
    assert cfg.base_url == "http://localhost:4000"
    assert cfg.log_level == "WARNING"


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    assert load_config(path=path, env={}) == InboxConfig()


def test_env_overrides_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"base_url": "http://file", "token": "file-token", "agent_id": "u1"}))
    cfg = load_config(path=path, env={"AGENT_INBOX_TOKEN": "env-token", "AGENT_INBOX_TIMEOUT": "5"})
    assert cfg.base_url == "http://file"
    assert cfg.token == "env-token"
    assert cfg.agent_id == "u1"
    assert cfg.timeout == 5.0


def test_empty_env_value_ignored(tmp_path):
    cfg = load_config(path=tmp_path / "none.json", env={"AGENT_INBOX_AGENT_ID": ""})
    assert cfg.agent_id is None


def test_save_and_load(tmp_path):
    path = tmp_path / "nested" / "config.json"
    save_config(InboxConfig(token="t", agent_id="u9"), path=path)
    assert json.loads(path.read_text())["agent_id"] == "u9"
    assert load_config(path=path, env={}).token == "t"
