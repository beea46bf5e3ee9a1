"""
Sessions REST API — GET /admin/sessions.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import ValidationError

from agent_inbox.errors import RequestFailedError
from agent_inbox.models.session import SessionListResponse
from agent_inbox.transport.http import HttpClient

SESSIONS_PATH = "/admin/sessions"


class SessionsAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list(
        self,
        agent_id: Optional[str] = None,
        status: Optional[str] = None,
        search: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> SessionListResponse:
        """List and filter sessions. Filters left as None are not sent."""
        params: dict[str, Any] = {
            "agentId": agent_id,
            "status": status,
            "search": search,
            "startDate": start_date,
            "endDate": end_date,
            "limit": limit,
            "offset": offset,
        }
        params = {k: v for k, v in params.items() if v is not None}
        body = await self._http.get(SESSIONS_PATH, params=params)
        if not isinstance(body, dict):
            raise RequestFailedError(f"Expected a JSON object from {SESSIONS_PATH}, got {type(body).__name__}")
        try:
            return SessionListResponse.model_validate(body)
        except ValidationError as e:
            raise RequestFailedError(f"Invalid session list: {e.error_count()} error(s)", details={"errors": e.errors()}) from e

    async def query(self, params: dict[str, str]) -> SessionListResponse:
        """List with wire-named params as produced by query.build_query."""
        return await self.list(agent_id=params.get("agentId"), status=params.get("status"))

    @staticmethod
    def path(session_id: str) -> str:
        """Console route of a session's detail view."""
        return f"/sessions/{session_id}"
