"""
Inbox controller. Owns the inbox view state and drives the load/refresh lifecycle.

Idle -> Loading -> Loaded | Failed | SignedOut. Any phase may go back to
Loading on a tab change, identity change or refresh.

Every fetch is tagged with a sequence number, the tab and the agent identity
at issue time. A completed fetch is applied only while all three still match;
anything else is a superseded response and is dropped.
"""

import asyncio
import logging
from typing import Callable, Optional, Union

from agent_inbox.auth import AuthContext
from agent_inbox.classifier import classify
from agent_inbox.errors import AuthExpiredError, RequestFailedError
from agent_inbox.models.inbox import InboxPhase, InboxState
from agent_inbox.models.session import Tab
from agent_inbox.query import build_query
from agent_inbox.sessions import SessionsAPI

logger = logging.getLogger(__name__)

Listener = Callable[[InboxState], None]


class InboxController:
    def __init__(
        self,
        sessions: SessionsAPI,
        auth: AuthContext,
        tab: Union[Tab, str] = Tab.ACTIVE,
        timeout: Optional[float] = None,
    ):
        self._sessions = sessions
        self._auth = auth
        self._timeout = timeout
        self._state = InboxState(selected_tab=Tab(tab))
        self._seq = 0
        self._listeners: list[Listener] = []

    @property
    def state(self) -> InboxState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener` with every published state. Returns a cleanup function."""
        self._listeners.append(listener)

        def remove() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass
        return remove

    async def start(self) -> InboxState:
        """Initial load of the selected tab."""
        return await self._load()

    async def select_tab(self, tab: Union[Tab, str]) -> InboxState:
        tab = Tab(tab)
        if tab is not self._state.selected_tab:
            self._publish(selected_tab=tab, sessions=[])
        return await self._load()

    async def refresh(self) -> InboxState:
        return await self._load()

    async def on_identity_changed(self) -> InboxState:
        """Reload after AuthContext.update(); in-flight fetches for the old identity are dropped."""
        self._publish(sessions=[], loading=False, error=None)
        return await self._load()

    async def _load(self) -> InboxState:
        agent_id = self._auth.agent_id
        if not agent_id:
            logger.debug("No agent identity, skipping session fetch")
            return self._state

        self._seq += 1
        seq = self._seq
        tab = self._state.selected_tab
        params = build_query(tab, agent_id)
        self._publish(loading=True, phase=InboxPhase.LOADING)

        try:
            fetch = self._sessions.query(params)
            if self._timeout is not None:
                result = await asyncio.wait_for(fetch, timeout=self._timeout)
            else:
                result = await fetch
        except AuthExpiredError:
            if not self._is_current(seq, tab, agent_id):
                logger.debug(f"Dropping superseded 401 for tab={tab.value} seq={seq}")
                return self._state
            logger.info(f"Session fetch for tab={tab.value} got 401, signing out")
            self._publish(loading=False, phase=InboxPhase.SIGNED_OUT)
            await self._auth.sign_out()
            return self._state
        except (RequestFailedError, asyncio.TimeoutError) as e:
            if not self._is_current(seq, tab, agent_id):
                logger.debug(f"Dropping superseded failure for tab={tab.value} seq={seq}: {e}")
                return self._state
            message = str(e) or type(e).__name__
            logger.warning(f"Failed to fetch sessions for tab={tab.value}: {message}")
            self._publish(sessions=[], loading=False, phase=InboxPhase.FAILED, error=message)
            return self._state

        if not self._is_current(seq, tab, agent_id):
            logger.debug(f"Dropping superseded response for tab={tab.value} seq={seq}")
            return self._state

        sessions = classify(tab, result.items)
        logger.debug(f"Fetched {len(result.items)} sessions, showing {len(sessions)} on tab={tab.value}")
        self._publish(sessions=sessions, loading=False, phase=InboxPhase.LOADED, error=None)
        return self._state

    def _is_current(self, seq: int, tab: Tab, agent_id: str) -> bool:
        return (
            seq == self._seq
            and tab is self._state.selected_tab
            and agent_id == self._auth.agent_id
        )

    def _publish(self, **changes) -> None:
        self._state = self._state.model_copy(update=changes)
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("Inbox listener failed")
