"""CLI: agent-inbox config set|show"""

from typing import Optional

import click
from rich.console import Console

from agent_inbox.config import load_config, save_config

console = Console()


def _mask(token: Optional[str]) -> str:
    if not token:
        return "-"
    return f"{token[:4]}…{token[-4:]}" if len(token) > 12 else "****"


@click.group()
def config():
    """Connection settings."""


@config.command("set")
@click.option("--base-url", default=None, help="Admin API base URL")
@click.option("--token", default=None, help="Bearer token issued by the console login")
@click.option("--agent-id", default=None, help="Your agent identity")
def config_set(base_url: Optional[str], token: Optional[str], agent_id: Optional[str]):
    """Save settings to ~/.agent-inbox/config.json."""
    cfg = load_config(env={})
    updates = {"base_url": base_url, "token": token, "agent_id": agent_id}
    cfg = cfg.model_copy(update={k: v for k, v in updates.items() if v is not None})
    path = save_config(cfg)
    console.print(f"[green]Saved to {path}[/green]")


@config.command("show")
def config_show():
    """Show the effective settings (file + environment)."""
    cfg = load_config()
    console.print(f"Base URL:  {cfg.base_url}")
    console.print(f"Agent ID:  {cfg.agent_id or '-'}")
    console.print(f"Token:     {_mask(cfg.token)}")
    console.print(f"Log level: {cfg.log_level}")
    console.print(f"Timeout:   {cfg.timeout}s")
