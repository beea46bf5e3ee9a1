"""
REST HTTP client for the admin console API.
"""

import logging
from typing import Any, Optional

import httpx

from agent_inbox.errors import AuthExpiredError, RequestFailedError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:4000"
DEFAULT_TIMEOUT_S = 30.0


class HttpClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_S,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={"User-Agent": "agent-inbox/0.1.0", "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def set_token(self, token: Optional[str]) -> None:
        self._token = token

    def _auth_headers(self, authenticated: bool) -> dict[str, str]:
        headers: dict[str, str] = {}
        if authenticated and self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def get(self, path: str, params: Optional[dict[str, Any]] = None, authenticated: bool = True) -> Any:
        logger.debug(f"GET {path} params={params}")
        try:
            resp = await self._client.get(path, params=params, headers=self._auth_headers(authenticated))
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as e:
            raise RequestFailedError(f"GET {path} failed: {e}") from e

        if resp.status_code == 401:
            raise AuthExpiredError(f"HTTP 401 from {path}")
        if not resp.is_success:
            raise RequestFailedError(
                f"HTTP {resp.status_code}: {resp.text[:200]}",
                status_code=resp.status_code,
            )
        try:
            return resp.json()
        except ValueError as e:
            raise RequestFailedError(
                f"Malformed JSON from {path}: {e}", status_code=resp.status_code,
            ) from e

    async def close(self) -> None:
        await self._client.aclose()
