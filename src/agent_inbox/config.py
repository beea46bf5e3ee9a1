"""Configuration loaded from ~/.agent-inbox/config.json, overridden by environment variables."""

import json
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from agent_inbox.transport.http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_S

CONFIG_FILE = Path.home() / ".agent-inbox" / "config.json"

ENV_OVERRIDES = {
    "base_url": "AGENT_INBOX_BASE_URL",
    "token": "AGENT_INBOX_TOKEN",
    "agent_id": "AGENT_INBOX_AGENT_ID",
    "log_level": "AGENT_INBOX_LOG_LEVEL",
    "timeout": "AGENT_INBOX_TIMEOUT",
}


class InboxConfig(BaseModel):
    base_url: str = DEFAULT_BASE_URL
    token: Optional[str] = None
    agent_id: Optional[str] = None
    log_level: str = "WARNING"
    timeout: float = DEFAULT_TIMEOUT_S


def _read_file(path: Path) -> dict:
    try:
        data = json.loads(path.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_config(path: Optional[Path] = None, env: Optional[dict[str, str]] = None) -> InboxConfig:
    data = _read_file(path or CONFIG_FILE)
    env = os.environ if env is None else env
    for field, var in ENV_OVERRIDES.items():
        value = env.get(var)
        if value:
            data[field] = value
    return InboxConfig.model_validate(data)


def save_config(cfg: InboxConfig, path: Optional[Path] = None) -> Path:
    path = path or CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(cfg.model_dump(exclude_none=True), indent=2))
    return path
