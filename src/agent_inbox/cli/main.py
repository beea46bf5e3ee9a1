"""
Agent inbox CLI — `agent-inbox` command.

Commands:
  agent-inbox config set|show    Base URL, token and agent identity
  agent-inbox list [--tab TAB]   Sessions on one inbox tab
"""

import asyncio
import logging
from typing import Optional

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install agent-inbox[cli]")

from agent_inbox import __version__
from agent_inbox.client import AsyncInboxClient
from agent_inbox.config import InboxConfig, load_config

console = Console()


def _load_config() -> InboxConfig:
    return load_config()


def _get_client(cfg: Optional[InboxConfig] = None) -> AsyncInboxClient:
    cfg = cfg or _load_config()
    if not cfg.token or not cfg.agent_id:
        console.print("[red]No token or agent id. Run `agent-inbox config set --token ... --agent-id ...` first.[/red]")
        raise SystemExit(1)
    return AsyncInboxClient.from_config(cfg)


def _run(coro):
    return asyncio.run(coro)


@click.group()
@click.version_option(__version__)
@click.option("--log-level", default=None, help="Python logging level (default from config)")
def main(log_level: Optional[str]):
    """Agent inbox: your active chats and the unassigned queue, plus resolved history."""
    level = (log_level or _load_config().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register subcommands from separate modules
from agent_inbox.cli.config import config  # noqa: E402
from agent_inbox.cli.sessions import list_cmd  # noqa: E402

main.add_command(config)
main.add_command(list_cmd)


if __name__ == "__main__":
    main()
