"""
agent-inbox — agent triage inbox for the support console.

Fetches the sessions behind the My Active, Unassigned Queue and Resolved
History tabs, reclassifies them client-side and tracks the load lifecycle.
"""

from agent_inbox.auth import AuthContext
from agent_inbox.classifier import classify, is_bot_agent
from agent_inbox.client import AsyncInboxClient, InboxClient
from agent_inbox.errors import AuthExpiredError, InboxError, RequestFailedError
from agent_inbox.inbox import InboxController
from agent_inbox.models.inbox import InboxPhase, InboxState
from agent_inbox.models.session import Session, SessionListResponse, SessionStatus, Tab
from agent_inbox.query import build_query
from agent_inbox.sessions import SessionsAPI

__version__ = "0.1.0"
__all__ = [
    "AsyncInboxClient",
    "InboxClient",
    "AuthContext",
    "InboxController",
    "SessionsAPI",
    "InboxState",
    "InboxPhase",
    "Session",
    "SessionListResponse",
    "SessionStatus",
    "Tab",
    "build_query",
    "classify",
    "is_bot_agent",
    "InboxError",
    "AuthExpiredError",
    "RequestFailedError",
]
