"""
Session models: the rows of the agent inbox and the list endpoint's body.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Tab(str, Enum):
    ACTIVE = "active"
    UNASSIGNED = "unassigned"
    RESOLVED = "resolved"


class SessionStatus(str, Enum):
    ACTIVE = "active"
    CLOSED = "closed"


class Session(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    session_id: str = Field(alias="sessionId")
    status: Optional[str] = None  # opaque beyond active/closed
    last_message: str = Field(default="", alias="lastMessage")
    user_meta: Any = Field(default=None, alias="userMeta")
    assigned_agent: Optional[str] = Field(default=None, alias="assignedAgent")
    updated_at: str = Field(default="", alias="updatedAt")

    @field_validator("last_message", "updated_at", mode="before")
    @classmethod
    def _null_display_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def path(self) -> str:
        """Console route of the session detail view."""
        return f"/sessions/{self.session_id}"

    @property
    def is_closed(self) -> bool:
        return self.status == SessionStatus.CLOSED.value

    @property
    def is_unassigned(self) -> bool:
        return not self.assigned_agent


class SessionListResponse(BaseModel):
    """GET /admin/sessions body. The server answers with `items`; older builds use `sessions`."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[Session] = []
    total: Optional[int] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    has_more: Optional[bool] = Field(default=None, alias="hasMore")
    current_page: Optional[int] = Field(default=None, alias="currentPage")
    total_pages: Optional[int] = Field(default=None, alias="totalPages")

    @model_validator(mode="before")
    @classmethod
    def _pick_items(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        items = data.get("items")
        if items is None:
            items = data.get("sessions")
        data.pop("sessions", None)
        data["items"] = items if items is not None else []
        return data
