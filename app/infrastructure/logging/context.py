"""Session context binding for structured logging.

Binds translation-session metadata to every log entry emitted inside a
block, so locale switches and missing-key reports can be traced back to
the session that caused them.

Usage:
    from infrastructure.logging import bind_session_context

    with bind_session_context(session_id="sess-123", locale="ar"):
        logger.info("rendering_page")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_session_context(
    session_id: Optional[str] = None,
    locale: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind session-scoped context to all logs within the context manager.

    Args:
        session_id: Unique session identifier. Auto-generated if not provided.
        locale: Active locale of the session (if known).
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.
    """
    context: dict[str, Any] = {"session_id": session_id or str(uuid.uuid4())}

    if locale is not None:
        context["locale"] = locale

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_session_id() -> Optional[str]:
    """Get the current session ID from the logging context.

    Returns:
        The session ID if set, None otherwise.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("session_id")


def clear_session_context() -> None:
    """Clear all session-scoped context from the logging context."""
    structlog.contextvars.clear_contextvars()
