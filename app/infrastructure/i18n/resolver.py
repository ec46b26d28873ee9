"""Resolver: turns a dotted key and the active locale into display text.

Resolution never raises for missing data. A miss renders as
``[MISSING: <key>]`` in the pseudo locale and as the raw key elsewhere.
"""

import re
from typing import Any, Mapping, Optional, Sequence

from infrastructure.i18n.models import (
    PSEUDO_LOCALE,
    LocaleTable,
    ResolutionRequest,
)
from infrastructure.i18n.registry import LocaleRegistry
from infrastructure.logging import get_module_logger

logger = get_module_logger()

PLACEHOLDER_PATTERN = re.compile(r"\{\s*([^{}\s]+)\s*\}")


def missing_marker(key: str) -> str:
    """Marker rendered for a missing key in the pseudo locale."""
    return f"[MISSING: {key}]"


def lookup(table: LocaleTable, segments: Sequence[str]) -> Optional[str]:
    """Walk ``table`` along ``segments``.

    Args:
        table: Table of the active locale.
        segments: Ordered key path segments.

    Returns:
        The string leaf, or None when a segment is absent, when the path
        stops on a nested table, or when the leaf is not a string. An empty
        string is a valid result.
    """
    node: Any = table
    for segment in segments:
        if not isinstance(node, LocaleTable) or segment not in node:
            return None
        node = node.get(segment)
    return node if isinstance(node, str) else None


def interpolate(message: str, params: Optional[Mapping[str, str]]) -> str:
    """Replace ``{name}`` placeholders with parameter values.

    Whitespace inside the braces is tolerated. Placeholders without a
    matching parameter are left verbatim, and substituted values are not
    scanned again.
    """
    if not params:
        return message

    def replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name in params:
            return str(params[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replace, message)


class Resolver:
    """Resolves keys against the tables of a LocaleRegistry.

    Attributes:
        registry: The process-wide LocaleRegistry.
        fallback_locale: Optional locale retried after a miss in a
            non-pseudo locale, before the raw key is returned.
    """

    def __init__(
        self,
        registry: LocaleRegistry,
        fallback_locale: Optional[str] = None,
    ):
        self.registry = registry
        self.fallback_locale = (
            str(getattr(fallback_locale, "value", fallback_locale))
            if fallback_locale is not None
            else None
        )
        if self.fallback_locale is not None:
            # fallback locale must be registered
            self.registry.load(self.fallback_locale)

    def resolve(
        self,
        locale: str,
        key: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Resolve ``key`` in ``locale`` and interpolate ``params``.

        Raises:
            UnknownLocaleError: If the locale is not registered.
        """
        return self.resolve_request(locale, ResolutionRequest.build(key, params))

    def resolve_request(self, locale: str, request: ResolutionRequest) -> str:
        """Resolve a prepared ResolutionRequest.

        Raises:
            UnknownLocaleError: If the locale is not registered.
        """
        locale = str(getattr(locale, "value", locale))
        table = self.registry.load(locale)
        message = lookup(table, request.segments)

        if message is None:
            if locale == PSEUDO_LOCALE.value:
                logger.debug("translation_missing", key=request.key, locale=locale)
                return missing_marker(request.key)

            message = self._lookup_fallback(locale, request)
            if message is None:
                logger.debug("translation_missing", key=request.key, locale=locale)
                return request.key

        return interpolate(message, request.params)

    def _lookup_fallback(
        self, locale: str, request: ResolutionRequest
    ) -> Optional[str]:
        if self.fallback_locale is None or self.fallback_locale == locale:
            return None
        message = lookup(self.registry.load(self.fallback_locale), request.segments)
        if message is not None:
            logger.debug(
                "used_fallback_translation",
                key=request.key,
                requested_locale=locale,
                fallback_locale=self.fallback_locale,
            )
        return message

    def has_key(self, locale: str, key: str) -> bool:
        """Check whether ``key`` resolves to a string in ``locale`` itself."""
        return lookup(self.registry.load(locale), key.split(".")) is not None
