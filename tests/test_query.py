"""Tests for per-tab query parameters."""

import pytest

from agent_inbox.models.session import Tab
from agent_inbox.query import build_query


def test_active_filters_by_agent_only():
    assert build_query(Tab.ACTIVE, "u1") == {"agentId": "u1"}


def test_unassigned_filters_by_open_status_only():
    assert build_query(Tab.UNASSIGNED, "u1") == {"status": "active"}


def test_resolved_filters_by_closed_status_and_agent():
    assert build_query(Tab.RESOLVED, "u1") == {"status": "closed", "agentId": "u1"}


def test_accepts_string_tab():
    assert build_query("resolved", "u2") == build_query(Tab.RESOLVED, "u2")


def test_deterministic():
    assert build_query(Tab.ACTIVE, "u1") == build_query(Tab.ACTIVE, "u1")


def test_unknown_tab_rejected():
    with pytest.raises(ValueError):
        build_query("archived", "u1")
