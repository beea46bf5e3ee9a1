"""
Client-side reclassification of a fetched session list.

Rules the server does not apply:
- active: an agent's own sessions, minus the ones already closed
- unassigned: open sessions nobody holds, plus the ones held by automation
  so a human can take them over
- resolved: the server filter is authoritative
"""

from typing import Iterable, Optional, Union

from agent_inbox.models.session import Session, Tab

BOT_MARKERS = ("bot", "ai")
SYSTEM_AGENT = "system"


def is_bot_agent(assigned_agent: Optional[str]) -> bool:
    """Naming heuristic for sessions handled by automation rather than a person."""
    if not assigned_agent:
        return False
    value = assigned_agent.lower()
    return any(marker in value for marker in BOT_MARKERS) or value == SYSTEM_AGENT


def classify(tab: Union[Tab, str], sessions: Iterable[Session]) -> list[Session]:
    tab = Tab(tab)
    if tab is Tab.ACTIVE:
        return [s for s in sessions if not s.is_closed]
    if tab is Tab.UNASSIGNED:
        return [s for s in sessions if s.is_unassigned or is_bot_agent(s.assigned_agent)]
    return list(sessions)
