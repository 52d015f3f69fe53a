# tests/unit/logging/test_unit_context.py — v2
"""Tests for logging/context.py — contextual logging variables."""

from __future__ import annotations

from lumberjack.logging.context import (
    clear_context,
    get_context,
    set_request_context,
    set_service_context,
)


class TestLogContext:
    def test_initial_state(self):
        ctx = get_context()
        assert ctx.service is None
        assert ctx.request_id is None
        assert ctx.component is None

    def test_set_service_context(self):
        set_service_context("user-service")
        assert get_context().service == "user-service"

    def test_empty_service_is_unset(self):
        set_service_context("")
        assert get_context().service is None

    def test_set_request_context(self):
        set_request_context("req-42", "billing")
        ctx = get_context()
        assert ctx.request_id == "req-42"
        assert ctx.component == "billing"

    def test_as_dict_filters_none(self):
        set_service_context("svc")
        d = get_context().as_dict()
        assert d == {"service": "svc"}

    def test_clear(self):
        set_service_context("svc")
        set_request_context("req-1")
        clear_context()
        ctx = get_context()
        assert ctx.service is None
        assert ctx.request_id is None
