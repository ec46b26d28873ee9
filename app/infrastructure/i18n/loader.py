"""Translation loading interface and implementations.

Defines the contract for loading locale resources into immutable
LocaleTables, with JSON and YAML implementations. Both apply the
first-occurrence duplicate-key rule while parsing.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping

import yaml

from infrastructure.i18n.exceptions import LocaleResourceError
from infrastructure.i18n.models import LocaleTable
from infrastructure.i18n.sanitation import (
    FirstOccurrenceLoader,
    find_duplicate_keys,
    first_occurrence_pairs,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

SNIPPET_RADIUS = 80


def error_snippet(content: str, position: int, radius: int = SNIPPET_RADIUS) -> str:
    """Return the text within ``radius`` characters of ``position``."""
    start = max(0, position - radius)
    end = min(len(content), position + radius)
    return content[start:end]


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations define how locale resources are found and parsed.
    """

    def __init__(self, translations_dir: Path, use_cache: bool = True):
        """Initialize loader.

        Args:
            translations_dir: Path to directory with translation files.
            use_cache: Whether to cache loaded tables in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, LocaleTable] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_translation_loader",
            loader=type(self).__name__,
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    @abstractmethod
    def _read(self, locale: str) -> Mapping[str, Any]:
        """Read and merge the raw resource data of one locale.

        Raises:
            FileNotFoundError: If no resource exists for the locale.
            LocaleResourceError: If a resource cannot be parsed.
        """

    def load(self, locale: str) -> LocaleTable:
        """Load the table for a locale.

        Args:
            locale: Locale identifier.

        Returns:
            Immutable LocaleTable.

        Raises:
            FileNotFoundError: If no resource exists for the locale.
            LocaleResourceError: If a resource cannot be parsed.
        """
        locale = str(getattr(locale, "value", locale))
        if self.use_cache and locale in self.cache:
            logger.debug("loaded_from_cache", locale=locale)
            return self.cache[locale]

        table = LocaleTable.from_mapping(self._read(locale))

        logger.info(
            "loaded_translations",
            locale=locale,
            namespace_count=len(table),
        )

        if self.use_cache:
            self.cache[locale] = table

        return table

    def load_all(self, locales: Iterable[str]) -> Dict[str, LocaleTable]:
        """Load tables for every declared locale.

        A declared locale without resources gets an empty table; this is a
        valid, intentionally unimplemented locale and only degrades
        resolution.

        Args:
            locales: Locale identifiers to load.

        Returns:
            Dict mapping each locale to its LocaleTable.
        """
        result: Dict[str, LocaleTable] = {}
        for locale in locales:
            locale = str(getattr(locale, "value", locale))
            try:
                result[locale] = self.load(locale)
            except FileNotFoundError:
                logger.warning("locale_resource_missing", locale=locale)
                result[locale] = LocaleTable.empty()
        return result

    def clear_cache(self) -> None:
        """Clear all cached tables."""
        self.cache.clear()
        logger.info("cleared_translation_cache")


class JSONTranslationLoader(TranslationLoader):
    """Loader for ``<locale>.json`` resource files (UTF-8)."""

    def _read(self, locale: str) -> Mapping[str, Any]:
        path = self.translations_dir / f"{locale}.json"
        if not path.is_file():
            raise FileNotFoundError(
                f"No translation file found for locale {locale} in {self.translations_dir}"
            )

        content = path.read_text(encoding="utf-8")
        try:
            data = json.loads(content, object_pairs_hook=first_occurrence_pairs)
        except json.JSONDecodeError as e:
            logger.error("json_parse_error", file=str(path), error=str(e))
            raise LocaleResourceError(
                f"Failed to parse {path}: {e}",
                path=str(path),
                position=e.pos,
                snippet=error_snippet(content, e.pos),
            ) from e

        duplicates = find_duplicate_keys(content)
        if duplicates:
            logger.warning(
                "duplicate_keys_dropped",
                file=str(path),
                duplicate_count=len(duplicates),
                sample=duplicates[:10],
            )

        if not isinstance(data, dict):
            raise LocaleResourceError(
                f"Expected a JSON object at the top of {path}", path=str(path)
            )
        return data


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML resource files.

    Expects files named ``<locale>.yml`` or ``<domain>.<locale>.yml``.
    All matching files are merged in sorted order; a later file overrides
    top-level namespaces key by key.
    """

    def _files_for(self, locale: str) -> List[Path]:
        files = set(self.translations_dir.glob(f"*.{locale}.yml"))
        single = self.translations_dir / f"{locale}.yml"
        if single.is_file():
            files.add(single)
        return sorted(files)

    def _read(self, locale: str) -> Mapping[str, Any]:
        yaml_files = self._files_for(locale)
        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale} in {self.translations_dir}"
            )

        merged: Dict[str, Any] = {}
        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.load(f, Loader=FirstOccurrenceLoader)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                mark = getattr(e, "problem_mark", None)
                raise LocaleResourceError(
                    f"Failed to parse {yaml_file}: {e}",
                    path=str(yaml_file),
                    position=mark.index if mark is not None else None,
                ) from e

            if data is None:
                continue
            if not isinstance(data, dict):
                raise LocaleResourceError(
                    f"Expected a mapping at the top of {yaml_file}",
                    path=str(yaml_file),
                )
            _merge(merged, data)

        return merged


def _merge(target: Dict[str, Any], source: Mapping[str, Any]) -> None:
    for namespace, messages in source.items():
        existing = target.get(namespace)
        if isinstance(existing, dict) and isinstance(messages, dict):
            existing.update(messages)
        else:
            target[namespace] = messages
