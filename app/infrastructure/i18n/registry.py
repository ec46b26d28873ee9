"""LocaleRegistry: the fixed set of locale tables for a process.

Written once at startup and never edited afterwards. Replacing a table
produces a new registry.
"""

from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Tuple, Union

from infrastructure.i18n.exceptions import UnknownLocaleError
from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import LocaleTable
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def _locale_id(locale: Any) -> str:
    return str(getattr(locale, "value", locale))


class LocaleRegistry:
    """Immutable mapping of locale identifier to LocaleTable.

    Entries may be empty tables; an empty locale resolves every key as
    missing but never raises.
    """

    def __init__(self, tables: Mapping[Any, Union[LocaleTable, Mapping[str, Any]]]):
        frozen = {}
        for locale, table in tables.items():
            if not isinstance(table, LocaleTable):
                table = LocaleTable.from_mapping(table)
            frozen[_locale_id(locale)] = table
        self._tables = MappingProxyType(frozen)

    @classmethod
    def from_loader(
        cls, loader: TranslationLoader, locales: Iterable[str]
    ) -> "LocaleRegistry":
        """Build a registry from every declared locale the loader can read."""
        registry = cls(loader.load_all(locales))
        logger.info("locale_registry_created", locales=list(registry.locales))
        return registry

    def load(self, locale: Any) -> LocaleTable:
        """Return the table of a registered locale.

        Raises:
            UnknownLocaleError: If the locale is not registered.
        """
        try:
            return self._tables[_locale_id(locale)]
        except KeyError:
            raise UnknownLocaleError(_locale_id(locale), available=self.locales) from None

    def with_table(self, locale: Any, table: LocaleTable) -> "LocaleRegistry":
        """Return a new registry with ``locale`` mapped to ``table``."""
        tables = dict(self._tables)
        tables[_locale_id(locale)] = table
        return LocaleRegistry(tables)

    @property
    def locales(self) -> Tuple[str, ...]:
        return tuple(self._tables)

    def items(self) -> Iterator[Tuple[str, LocaleTable]]:
        return iter(self._tables.items())

    def __contains__(self, locale: object) -> bool:
        return _locale_id(locale) in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def __repr__(self) -> str:
        return f"LocaleRegistry(locales={list(self.locales)!r})"
