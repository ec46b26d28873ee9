"""Translation models for i18n system.

Defines the locale identifiers, the immutable LocaleTable tree and the
per-call ResolutionRequest.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, Tuple, Union

from infrastructure.i18n.exceptions import UnknownLocaleError


class Locale(str, Enum):
    """Locale identifiers registered by the application.

    PSEUDO is a synthetic locale used to make missing keys visible in
    manual and automated UI scans.
    """

    AR = "ar"
    EN = "en"
    PSEUDO = "pseudo"

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Convert string to Locale enum.

        Args:
            locale_str: Locale string (e.g., "ar", "en").

        Returns:
            Matching Locale enum value.

        Raises:
            UnknownLocaleError: If locale string is not supported.
        """
        try:
            return cls(locale_str)
        except ValueError as e:
            raise UnknownLocaleError(
                locale_str, available=[member.value for member in cls]
            ) from e

    @property
    def language(self) -> str:
        """Language part of the locale (e.g., "ar" from "ar-EG")."""
        return self.value.split("-")[0]

    @property
    def is_pseudo(self) -> bool:
        return self is Locale.PSEUDO


DEFAULT_LOCALE = Locale.AR
PSEUDO_LOCALE = Locale.PSEUDO
RTL_LANGUAGES = frozenset({"ar"})


class Direction(str, Enum):
    """Text direction used for layout mirroring."""

    LTR = "ltr"
    RTL = "rtl"


def direction_for(locale: str) -> Direction:
    """Derive text direction from a locale identifier.

    Args:
        locale: Locale identifier (plain string or Locale).

    Returns:
        Direction.RTL for right-to-left languages, Direction.LTR otherwise.
    """
    language = str(getattr(locale, "value", locale)).split("-")[0].lower()
    return Direction.RTL if language in RTL_LANGUAGES else Direction.LTR


def _freeze(value: Any) -> Any:
    if isinstance(value, LocaleTable):
        return value
    if isinstance(value, Mapping):
        return LocaleTable.from_mapping(value)
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    return value


@dataclass(frozen=True)
class LocaleTable:
    """Immutable nested key -> string tree for one locale.

    Each entry is either a nested LocaleTable or a leaf. Well-formed leaves
    are strings; anything else is kept as an opaque leaf so the resolver can
    treat it as "not found" instead of rendering it.

    Attributes:
        entries: Read-only mapping of segment name to LocaleTable or leaf.
    """

    entries: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "LocaleTable":
        """Build a frozen table from nested plain mappings.

        Args:
            data: Parsed resource data (e.g., from json.load).

        Returns:
            LocaleTable sharing no mutable state with ``data``.
        """
        frozen = {str(key): _freeze(value) for key, value in data.items()}
        return cls(entries=MappingProxyType(frozen))

    @classmethod
    def empty(cls) -> "LocaleTable":
        return cls()

    def get(self, segment: str) -> Optional[Union["LocaleTable", Any]]:
        return self.entries.get(segment)

    def __contains__(self, segment: object) -> bool:
        return segment in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def is_empty(self) -> bool:
        return not self.entries

    def iter_leaves(self, prefix: str = "") -> Iterator[Tuple[str, Any]]:
        """Yield (dotted_key, value) for every leaf in the tree."""
        for key, value in self.entries.items():
            path = f"{prefix}.{key}" if prefix else key
            if isinstance(value, LocaleTable):
                yield from value.iter_leaves(path)
            else:
                yield path, value

    def to_dict(self) -> dict:
        """Return a mutable deep copy as plain dicts and lists."""

        def thaw(value: Any) -> Any:
            if isinstance(value, LocaleTable):
                return value.to_dict()
            if isinstance(value, tuple):
                return [thaw(item) for item in value]
            return value

        return {key: thaw(value) for key, value in self.entries.items()}


@dataclass(frozen=True)
class ResolutionRequest:
    """A dotted key path plus optional interpolation parameters.

    Parameter values are stringified when the request is built, so the
    resolver only ever handles strings.

    Attributes:
        key: Dotted key path (e.g., "app.installApp").
        params: Mapping of placeholder name to string value, or None.
    """

    key: str
    params: Optional[Mapping[str, str]] = None

    @classmethod
    def build(
        cls, key: str, params: Optional[Mapping[str, Any]] = None
    ) -> "ResolutionRequest":
        """Create a request, converting parameter values with str()."""
        if params is None:
            return cls(key=key)
        return cls(
            key=key,
            params=MappingProxyType(
                {str(name): str(value) for name, value in params.items()}
            ),
        )

    @property
    def segments(self) -> Tuple[str, ...]:
        """Ordered path segments of the key."""
        return tuple(self.key.split("."))
