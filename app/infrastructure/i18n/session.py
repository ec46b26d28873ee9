"""TranslationSession: the active locale of one UI session.

Each session owns its own instance and passes it to consuming code; there
is no process-wide "current locale". ``t()`` is the only entry point
rendering code should use.
"""

import threading
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional

from infrastructure.i18n.exceptions import (
    InvalidLocaleError,
    SessionNotInitializedError,
    UnknownLocaleError,
)
from infrastructure.i18n.models import (
    DEFAULT_LOCALE,
    PSEUDO_LOCALE,
    Direction,
    direction_for,
)
from infrastructure.i18n.registry import LocaleRegistry
from infrastructure.i18n.resolver import Resolver
from infrastructure.logging import get_module_logger

logger = get_module_logger()

TEST_LOCALE_STORAGE_KEY = "test-language"

LocaleListener = Callable[[str, Direction], None]


class SessionState(str, Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"


class TranslationSession:
    """Holds the current locale and derives text direction from it.

    Lifecycle: UNINITIALIZED until ``initialize()`` runs once, READY after
    that. ``set_locale`` only moves READY -> READY.

    Usage:
        session = TranslationSession(registry)
        session.initialize(storage=request.cookies)

        session.t("app.installApp")
        session.set_locale("en")
        session.get_direction()  # Direction.LTR
    """

    def __init__(
        self,
        registry: LocaleRegistry,
        default_locale: str = DEFAULT_LOCALE,
        resolver: Optional[Resolver] = None,
        allow_test_override: bool = True,
    ):
        self.registry = registry
        self.resolver = resolver or Resolver(registry)
        self.default_locale = str(getattr(default_locale, "value", default_locale))
        self.allow_test_override = allow_test_override
        self._state = SessionState.UNINITIALIZED
        self._locale: Optional[str] = None
        self._listeners: List[LocaleListener] = []
        self._lock = threading.RLock()

        if self.default_locale not in registry:
            raise UnknownLocaleError(self.default_locale, available=registry.locales)

    @property
    def state(self) -> SessionState:
        return self._state

    def initialize(self, storage: Optional[Mapping[str, Any]] = None) -> "TranslationSession":
        """Move the session to READY.

        Reads the test override from ``storage`` exactly once. Only the
        pseudo locale can be forced this way, and only when the session
        allows test overrides. Calling again is a no-op.

        Args:
            storage: Session-scoped key/value store (cookies, a session dict).

        Returns:
            The session itself.
        """
        with self._lock:
            if self._state is SessionState.READY:
                logger.debug("session_already_initialized", locale=self._locale)
                return self

            locale = self.default_locale
            override = storage.get(TEST_LOCALE_STORAGE_KEY) if storage else None
            if override == PSEUDO_LOCALE.value:
                if not self.allow_test_override:
                    logger.warning("test_locale_override_refused", override=override)
                elif override not in self.registry:
                    logger.warning("test_locale_not_registered", override=override)
                else:
                    locale = override

            self._locale = locale
            self._state = SessionState.READY

        logger.info(
            "translation_session_ready",
            locale=locale,
            direction=direction_for(locale).value,
        )
        return self

    def _require_ready(self) -> str:
        if self._state is not SessionState.READY or self._locale is None:
            raise SessionNotInitializedError(
                "TranslationSession must be initialized before use"
            )
        return self._locale

    def get_locale(self) -> str:
        with self._lock:
            return self._require_ready()

    def set_locale(self, locale: str) -> None:
        """Switch the active locale.

        Args:
            locale: A registered locale identifier.

        Raises:
            InvalidLocaleError: If the locale is not registered. The
                previous locale stays active.
            SessionNotInitializedError: If called before initialize().

        A listener that raises is logged and skipped; the switch stands and
        the remaining listeners still run.
        """
        locale = str(getattr(locale, "value", locale))
        with self._lock:
            previous = self._require_ready()
            if locale not in self.registry:
                logger.warning(
                    "invalid_locale_rejected", locale=locale, current=previous
                )
                raise InvalidLocaleError(locale, available=self.registry.locales)

            self._locale = locale
            direction = direction_for(locale)
            listeners = list(self._listeners)

            logger.info(
                "locale_changed",
                previous=previous,
                locale=locale,
                direction=direction.value,
            )
            for listener in listeners:
                try:
                    listener(locale, direction)
                except Exception:
                    logger.exception("locale_listener_failed", locale=locale)

    def get_direction(self) -> Direction:
        """Direction of the current locale, recomputed on every call."""
        return direction_for(self.get_locale())

    def document_attributes(self) -> Dict[str, str]:
        """``dir`` and ``lang`` attributes for the root document element."""
        locale = self.get_locale()
        return {"dir": direction_for(locale).value, "lang": locale}

    def t(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Translate ``key`` in the current locale.

        Args:
            key: Dotted key path (e.g., "app.installApp").
            params: Optional placeholder values, converted with str().

        Returns:
            The resolved text, the pseudo-locale marker, or the raw key.
        """
        return self.resolver.resolve(self.get_locale(), key, params)

    def subscribe(self, listener: LocaleListener) -> Callable[[], None]:
        """Register a callback run with (locale, direction) after each switch.

        Exceptions raised by the callback are logged, not propagated.

        Returns:
            A function that removes the listener.
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe
