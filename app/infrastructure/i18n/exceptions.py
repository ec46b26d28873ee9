"""Custom exceptions for the i18n system.

Missing translations are not exceptions: the resolver degrades them to a
marker or to the raw key. Only locale identity and resource parsing fail
loudly.
"""

from typing import Iterable, Optional


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            session.set_locale(requested)
        except I18nError as e:
            logger.warning("i18n_error", error=str(e))
    """

    pass


class UnknownLocaleError(I18nError, ValueError):
    """Raised when a locale identifier is not in the LocaleRegistry.

    Example:
        >>> registry.load("xx")
        Traceback (most recent call last):
        ...
        UnknownLocaleError: Unknown locale 'xx' (available: ar, en, pseudo)
    """

    def __init__(self, locale: str, available: Optional[Iterable[str]] = None):
        self.locale = locale
        self.available = tuple(available or ())
        message = f"Unknown locale '{locale}'"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class InvalidLocaleError(UnknownLocaleError):
    """Raised by TranslationSession.set_locale for an unregistered locale.

    The session keeps its previous locale when this is raised.
    """

    pass


class SessionNotInitializedError(I18nError):
    """Raised when a TranslationSession is used before initialize()."""

    pass


class LocaleResourceError(I18nError):
    """Raised when a locale resource cannot be parsed into a table.

    Attributes:
        path: Resource file that failed (if known).
        position: Character offset of the failure (if known).
        snippet: Text around the failing position (if known).
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        position: Optional[int] = None,
        snippet: Optional[str] = None,
    ):
        self.path = path
        self.position = position
        self.snippet = snippet
        super().__init__(message)
