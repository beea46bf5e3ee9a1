"""
Inbox view state, as read by the presentation layer.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from agent_inbox.models.session import Session, Tab


class InboxPhase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"
    SIGNED_OUT = "signed_out"


class InboxState(BaseModel):
    selected_tab: Tab = Tab.ACTIVE
    sessions: list[Session] = []
    loading: bool = False
    phase: InboxPhase = InboxPhase.IDLE
    error: Optional[str] = None
