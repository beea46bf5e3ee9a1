"""Shared pytest fixtures for agent inbox tests."""

import asyncio
from typing import Any, Callable, Optional

import httpx
import pytest

from agent_inbox.auth import AuthContext
from agent_inbox.inbox import InboxController
from agent_inbox.sessions import SessionsAPI
from agent_inbox.transport.http import HttpClient

BASE_URL = "http://inbox.test"


def session_json(session_id: str, status: str = "active", assigned_agent: Optional[str] = None, **extra: Any) -> dict:
    data = {
        "sessionId": session_id,
        "status": status,
        "lastMessage": "hello",
        "userMeta": {"name": "Visitor"},
        "updatedAt": "2024-05-01T10:00:00.000Z",
    }
    if assigned_agent is not None:
        data["assignedAgent"] = assigned_agent
    data.update(extra)
    return data


class FakeServer:
    """httpx MockTransport handler that records requests and replays queued responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responses: list[Callable[[httpx.Request], Any]] = []
        self.default = httpx.Response(200, json={"items": []})

    def reply(self, status_code: int = 200, json: Any = None, **kwargs: Any) -> None:
        self.responses.append(lambda request: httpx.Response(status_code, json=json, **kwargs))

    def reply_after(self, gate: asyncio.Event, status_code: int = 200, json: Any = None) -> None:
        async def _respond(request: httpx.Request) -> httpx.Response:
            await gate.wait()
            return httpx.Response(status_code, json=json)
        self.responses.append(_respond)

    def fail(self, exc: Exception) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc
        self.responses.append(_raise)

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            return self.default
        result = self.responses.pop(0)(request)
        if asyncio.iscoroutine(result):
            result = await result
        return result


class SignOutRecorder:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def http(server: FakeServer) -> HttpClient:
    return HttpClient(base_url=BASE_URL, token="tok-1", transport=httpx.MockTransport(server))


@pytest.fixture
def sessions_api(http: HttpClient) -> SessionsAPI:
    return SessionsAPI(http)


@pytest.fixture
def sign_out() -> SignOutRecorder:
    return SignOutRecorder()


@pytest.fixture
def auth(http: HttpClient, sign_out: SignOutRecorder) -> AuthContext:
    return AuthContext(agent_id="u1", token="tok-1", sign_out=sign_out, http=http)


@pytest.fixture
def controller(sessions_api: SessionsAPI, auth: AuthContext) -> InboxController:
    return InboxController(sessions_api, auth)
