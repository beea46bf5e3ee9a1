"""
Auth context: the agent identity, bearer token and sign-out hook the inbox runs with.

Login itself happens elsewhere; this only carries its result and the way back out.
"""

import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, Union

from agent_inbox.transport.http import HttpClient

logger = logging.getLogger(__name__)

SignOut = Callable[[], Union[None, Awaitable[None]]]


class AuthContext:
    def __init__(
        self,
        agent_id: Optional[str] = None,
        token: Optional[str] = None,
        sign_out: Optional[SignOut] = None,
        http: Optional[HttpClient] = None,
    ):
        self._agent_id = agent_id or None
        self._token = token
        self._sign_out = sign_out
        self._http = http
        if http is not None:
            http.set_token(token)

    @property
    def agent_id(self) -> Optional[str]:
        return self._agent_id

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def signed_in(self) -> bool:
        return self._agent_id is not None

    def update(self, agent_id: Optional[str], token: Optional[str]) -> None:
        """Swap in a new identity (re-login). Follow with InboxController.on_identity_changed()."""
        self._agent_id = agent_id or None
        self._token = token
        if self._http is not None:
            self._http.set_token(token)

    async def sign_out(self) -> None:
        """Drop the identity and run the sign-out hook, awaiting it if it is a coroutine."""
        logger.info(f"Signing out agent {self._agent_id}")
        self._agent_id = None
        self._token = None
        if self._http is not None:
            self._http.set_token(None)
        if self._sign_out is None:
            return
        try:
            result: Any = self._sign_out()
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.exception("Sign-out hook failed")
