"""CLI: agent-inbox list"""

import json

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from agent_inbox.models.inbox import InboxPhase
from agent_inbox.models.session import SessionStatus, Tab

console = Console()

TAB_TITLES = {
    Tab.ACTIVE: "My Active",
    Tab.UNASSIGNED: "Unassigned Queue",
    Tab.RESOLVED: "Resolved History",
}

EMPTY_MESSAGES = {
    Tab.ACTIVE: "You don't have any active conversations at the moment.",
    Tab.UNASSIGNED: "There are no unassigned queries waiting.",
    Tab.RESOLVED: "Your resolved conversation history will appear here.",
}


def _get_client():
    from agent_inbox.cli.main import _get_client
    return _get_client()


def _run(coro):
    from agent_inbox.cli.main import _run
    return _run(coro)


@click.command("list")
@click.option("--tab", type=click.Choice([t.value for t in Tab]), default=Tab.ACTIVE.value)
@click.option("--json-output", "--json", is_flag=True)
def list_cmd(tab, json_output):
    """List the sessions on one inbox tab."""

    async def _list():
        client = _get_client()
        try:
            state = await client.load(tab)
        finally:
            await client.close()
        return client, state

    client, state = _run(_list())
    selected = Tab(tab)

    if state.phase is InboxPhase.SIGNED_OUT:
        console.print("[red]Token rejected (HTTP 401). Update it with `agent-inbox config set --token ...`.[/red]")
        raise SystemExit(1)
    if state.phase is InboxPhase.FAILED:
        console.print(f"[red]Failed to fetch sessions: {escape(state.error or '')}[/red]")
        raise SystemExit(1)

    if json_output:
        click.echo(json.dumps([s.model_dump(by_alias=True) for s in state.sessions], indent=2))
        return
    if not state.sessions:
        console.print(f"[dim]{EMPTY_MESSAGES[selected]}[/dim]")
        return

    table = Table(title=f"{TAB_TITLES[selected]} ({len(state.sessions)})")
    table.add_column("Session ID", style="bold")
    table.add_column("Status")
    table.add_column("Assigned")
    table.add_column("Updated")
    table.add_column("Link")
    for s in state.sessions:
        status_style = "green" if s.status == SessionStatus.ACTIVE.value else "dim"
        table.add_row(
            escape(s.session_id),
            f"[{status_style}]{escape(s.status or '-')}[/{status_style}]",
            escape(s.assigned_agent or "-"),
            escape(s.updated_at),
            escape(client.session_url(s.session_id)),
        )
    console.print(table)
