"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_locale_registry,
    make_locale_table,
    make_resolution_request,
    make_settings,
    make_translation_session,
)

__all__ = [
    "make_locale_registry",
    "make_locale_table",
    "make_resolution_request",
    "make_settings",
    "make_translation_session",
]
