"""
AsyncInboxClient / InboxClient — wire the transport, auth context and inbox controller together.
"""

import asyncio
from typing import Any, Optional, Union

import httpx

from agent_inbox.auth import AuthContext, SignOut
from agent_inbox.config import InboxConfig
from agent_inbox.inbox import InboxController, Listener
from agent_inbox.models.inbox import InboxState
from agent_inbox.models.session import Tab
from agent_inbox.sessions import SessionsAPI
from agent_inbox.transport.http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_S, HttpClient


class AsyncInboxClient:
    """Async inbox client (primary)."""

    def __init__(
        self,
        agent_id: Optional[str] = None,
        token: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        sign_out: Optional[SignOut] = None,
        timeout: float = DEFAULT_TIMEOUT_S,
        tab: Union[Tab, str] = Tab.ACTIVE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self.http = HttpClient(base_url=base_url, token=token, timeout=timeout, transport=transport)
        self.auth = AuthContext(agent_id=agent_id, token=token, sign_out=sign_out, http=self.http)
        self.sessions = SessionsAPI(self.http)
        self.inbox = InboxController(self.sessions, self.auth, tab=tab)

    @classmethod
    def from_config(cls, cfg: InboxConfig, **kwargs: Any) -> "AsyncInboxClient":
        return cls(
            agent_id=cfg.agent_id,
            token=cfg.token,
            base_url=cfg.base_url,
            timeout=cfg.timeout,
            **kwargs,
        )

    @property
    def state(self) -> InboxState:
        return self.inbox.state

    async def load(self, tab: Optional[Union[Tab, str]] = None) -> InboxState:
        """Load `tab` (or reload the selected one)."""
        if tab is None:
            return await self.inbox.refresh()
        return await self.inbox.select_tab(tab)

    async def switch_identity(self, agent_id: Optional[str], token: Optional[str]) -> InboxState:
        self.auth.update(agent_id, token)
        return await self.inbox.on_identity_changed()

    def subscribe(self, listener: Listener):
        return self.inbox.subscribe(listener)

    def session_url(self, session_id: str) -> str:
        """Absolute console URL of a session's detail view."""
        return f"{self._base_url}{SessionsAPI.path(session_id)}"

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> "AsyncInboxClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


class InboxClient:
    """Sync wrapper around AsyncInboxClient. Runs the event loop internally."""

    def __init__(self, **kwargs: Any):
        self._async = AsyncInboxClient(**kwargs)
        self._loop = asyncio.new_event_loop()

    @classmethod
    def from_config(cls, cfg: InboxConfig, **kwargs: Any) -> "InboxClient":
        return cls(
            agent_id=cfg.agent_id,
            token=cfg.token,
            base_url=cfg.base_url,
            timeout=cfg.timeout,
            **kwargs,
        )

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def auth(self) -> AuthContext:
        return self._async.auth

    @property
    def state(self) -> InboxState:
        return self._async.state

    def load(self, tab: Optional[Union[Tab, str]] = None) -> InboxState:
        return self._run(self._async.load(tab))

    def refresh(self) -> InboxState:
        return self._run(self._async.inbox.refresh())

    def switch_identity(self, agent_id: Optional[str], token: Optional[str]) -> InboxState:
        return self._run(self._async.switch_identity(agent_id, token))

    def subscribe(self, listener: Listener):
        return self._async.subscribe(listener)

    def session_url(self, session_id: str) -> str:
        return self._async.session_url(session_id)

    def close(self) -> None:
        self._run(self._async.close())
        self._loop.close()
