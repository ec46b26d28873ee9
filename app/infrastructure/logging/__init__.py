"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
for the campus i18n application using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_logger(): Get a logger instance with a specific name
    - get_module_logger(): Get a logger for the calling module
    - bind_session_context(): Context manager for session-scoped logging
    - get_session_id(): Get current session ID from context
    - clear_session_context(): Clear all session context

Example:
    from infrastructure.logging import (
        configure_logging,
        get_module_logger,
        bind_session_context,
    )

    # At application startup
    configure_logging()

    # In a module
    logger = get_module_logger()
    logger.info("module_initialized")

    # Around a render pass
    with bind_session_context(session_id="sess-123", locale="ar"):
        logger.info("rendering_page")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_session_context,
    get_session_id,
    clear_session_context,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "get_module_logger",
    "bind_session_context",
    "get_session_id",
    "clear_session_context",
]
