"""
Integration tests against a running admin API.

Requires environment variables:
  AGENT_INBOX_TOKEN     — valid bearer token
  AGENT_INBOX_AGENT_ID  — agent identity the token belongs to
  AGENT_INBOX_BASE_URL  — (optional) defaults to http://localhost:4000

Run: AGENT_INBOX_INTEGRATION=1 pytest tests/integration/ -v
"""

import os

import pytest

from agent_inbox import AsyncInboxClient, InboxPhase, Tab

SKIP = not os.environ.get("AGENT_INBOX_INTEGRATION")
TOKEN = os.environ.get("AGENT_INBOX_TOKEN", "")
AGENT_ID = os.environ.get("AGENT_INBOX_AGENT_ID", "")
BASE_URL = os.environ.get("AGENT_INBOX_BASE_URL", "http://localhost:4000")

pytestmark = pytest.mark.skipif(SKIP, reason="AGENT_INBOX_INTEGRATION not set")


def make_client(**kwargs) -> AsyncInboxClient:
    return AsyncInboxClient(agent_id=AGENT_ID, token=TOKEN, base_url=BASE_URL, **kwargs)


class TestTabs:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("tab", list(Tab))
    async def test_each_tab_loads(self, tab):
        async with make_client() as client:
            state = await client.load(tab)
        assert state.phase is InboxPhase.LOADED
        ids = [s.session_id for s in state.sessions]
        assert len(ids) == len(set(ids))

    @pytest.mark.asyncio
    async def test_active_tab_has_no_closed_sessions(self):
        async with make_client() as client:
            state = await client.load(Tab.ACTIVE)
        assert all(s.status != "closed" for s in state.sessions)


class TestAuth:
    @pytest.mark.asyncio
    async def test_invalid_token_signs_out(self):
        calls = []
        client = AsyncInboxClient(agent_id=AGENT_ID, token="invalid", base_url=BASE_URL,
                                  sign_out=lambda: calls.append(1))
        state = await client.load()
        await client.close()
        assert state.phase is InboxPhase.SIGNED_OUT
        assert calls == [1]
