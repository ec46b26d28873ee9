"""Unit tests for infrastructure.logging.context module.

Tests cover:
- bind_session_context() context manager
- get_session_id()
- clear_session_context()
"""

import uuid

import pytest
import structlog

from infrastructure.logging.context import (
    bind_session_context,
    clear_session_context,
    get_session_id,
)


@pytest.fixture(autouse=True)
def clean_context():
    clear_session_context()
    yield
    clear_session_context()


@pytest.mark.unit
class TestBindSessionContext:
    """Test suite for bind_session_context context manager."""

    def test_auto_generates_session_id(self):
        with bind_session_context(locale="ar"):
            session_id = get_session_id()
            assert session_id is not None
            uuid.UUID(session_id)

    def test_uses_provided_session_id(self):
        with bind_session_context(session_id="sess-123"):
            assert get_session_id() == "sess-123"

    def test_binds_locale_and_extra(self):
        with bind_session_context(locale="ar", portal="parent"):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx["locale"] == "ar"
            assert ctx["portal"] == "parent"

    def test_locale_omitted_when_none(self):
        with bind_session_context():
            assert "locale" not in structlog.contextvars.get_contextvars()

    def test_context_removed_after_block(self):
        with bind_session_context(session_id="sess-123", locale="ar"):
            pass
        assert get_session_id() is None
        assert "locale" not in structlog.contextvars.get_contextvars()

    def test_context_removed_after_exception(self):
        with pytest.raises(RuntimeError):
            with bind_session_context(session_id="sess-123"):
                raise RuntimeError("boom")
        assert get_session_id() is None


@pytest.mark.unit
def test_clear_session_context():
    structlog.contextvars.bind_contextvars(session_id="sess-1")
    clear_session_context()
    assert get_session_id() is None
