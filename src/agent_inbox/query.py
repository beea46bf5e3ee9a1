"""
Per-tab query parameters for GET /admin/sessions.

The server filters on `agentId` and `status` only; it has no notion of an
unassigned session, so the unassigned queue asks for every open session and
the classifier narrows it down.
"""

from typing import Union

from agent_inbox.models.session import SessionStatus, Tab


def build_query(tab: Union[Tab, str], agent_id: str) -> dict[str, str]:
    tab = Tab(tab)
    if tab is Tab.ACTIVE:
        # every status; closed ones are dropped client-side
        return {"agentId": agent_id}
    if tab is Tab.UNASSIGNED:
        return {"status": SessionStatus.ACTIVE.value}
    return {"status": SessionStatus.CLOSED.value, "agentId": agent_id}
