"""Duplicate-key clean-up for locale resources.

A lookup table with repeated keys has no defined meaning, so every
resource passes through a de-duplication step before it is loaded. The
first occurrence of a key wins; later repeats at the same level are dropped.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

import yaml
from yaml.constructor import ConstructorError

from infrastructure.logging import get_module_logger

logger = get_module_logger()


def first_occurrence_pairs(pairs: Sequence[Tuple[str, Any]]) -> Dict[str, Any]:
    """JSON ``object_pairs_hook`` that keeps the first value of a repeated key.

    Args:
        pairs: Key/value pairs of one JSON object, in document order.

    Returns:
        Dict without repeated keys.
    """
    result: Dict[str, Any] = {}
    for key, value in pairs:
        if key not in result:
            result[key] = value
    return result


class PairList(list):
    """Raw ``(key, value)`` pairs of one JSON object, in document order.

    Used as ``object_pairs_hook`` so that an empty object parses to an empty
    PairList rather than an empty list, which would be mistaken for an array.
    """


def parse_pairs(text: str) -> PairList:
    """Parse JSON text keeping every object as a PairList.

    Raises:
        json.JSONDecodeError: If the text is not valid JSON.
    """
    return json.loads(text, object_pairs_hook=PairList)


def remove_duplicate_keys(obj: Any) -> Any:
    """Recursively rebuild ``obj`` keeping the first occurrence of each key.

    Accepts the parsed form of a resource: dicts, lists, scalars, and raw
    objects produced by ``parse_pairs``. Plain lists of ``(key, value)``
    pairs from ``object_pairs_hook=list`` are accepted too; in that form an
    empty list is read as an empty object, since the hook leaves no way to
    tell the two apart.
    """
    lenient = isinstance(obj, list) and not isinstance(obj, PairList)
    return _rebuild(obj, strict=not lenient)


def _rebuild(obj: Any, strict: bool) -> Any:
    if isinstance(obj, dict):
        return {key: _rebuild(value, strict) for key, value in obj.items()}
    if _is_object(obj, strict):
        return {
            key: _rebuild(value, strict)
            for key, value in first_occurrence_pairs(obj).items()
        }
    if isinstance(obj, list):
        return [_rebuild(item, strict) for item in obj]
    return obj


def _is_object(node: Any, strict: bool) -> bool:
    if isinstance(node, PairList):
        return True
    if strict or not isinstance(node, list):
        return False
    return all(_is_pair(item) for item in node)


def _is_pair(item: Any) -> bool:
    return isinstance(item, tuple) and len(item) == 2 and isinstance(item[0], str)


def find_duplicate_keys(text: str) -> List[str]:
    """Report the dotted path of every repeated key in a JSON document.

    Args:
        text: Raw JSON text.

    Returns:
        Dotted paths, one entry per extra occurrence, in document order.

    Raises:
        json.JSONDecodeError: If the text is not valid JSON.
    """
    raw = parse_pairs(text)
    duplicates: List[str] = []
    _walk_pairs(raw, "", duplicates)
    return duplicates


def _walk_pairs(node: Any, prefix: str, duplicates: List[str]) -> None:
    if isinstance(node, PairList):
        seen = set()
        for key, value in node:
            path = f"{prefix}.{key}" if prefix else key
            if key in seen:
                duplicates.append(path)
                continue
            seen.add(key)
            _walk_pairs(value, path, duplicates)
    elif isinstance(node, list):
        for index, item in enumerate(node):
            _walk_pairs(item, f"{prefix}[{index}]", duplicates)


def clean_locale_file(path: Path, force: bool = False) -> List[str]:
    """Rewrite a JSON locale file without duplicate keys.

    Args:
        path: Locale file to clean.
        force: Rewrite (and re-format) the file even when nothing changed.

    Returns:
        Dotted paths of the removed duplicates.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    duplicates = find_duplicate_keys(text)

    if duplicates or force:
        cleaned = json.loads(text, object_pairs_hook=first_occurrence_pairs)
        path.write_text(
            json.dumps(cleaned, ensure_ascii=False, indent=2) + "\n",
            encoding="utf-8",
        )
        logger.info(
            "cleaned_locale_file",
            file=str(path),
            duplicate_count=len(duplicates),
        )

    return duplicates


class FirstOccurrenceLoader(yaml.SafeLoader):
    """YAML SafeLoader whose mappings keep the first value of a repeated key."""

    def construct_mapping(self, node, deep=False):
        if not isinstance(node, yaml.MappingNode):
            raise ConstructorError(
                None,
                None,
                f"expected a mapping node, but found {node.id}",
                node.start_mark,
            )
        self.flatten_mapping(node)
        mapping: Dict[Any, Any] = {}
        for key_node, value_node in node.value:
            key = self.construct_object(key_node, deep=deep)
            if key in mapping:
                logger.warning(
                    "duplicate_yaml_key_dropped",
                    key=str(key),
                    line=key_node.start_mark.line + 1,
                )
                continue
            mapping[key] = self.construct_object(value_node, deep=deep)
        return mapping


FirstOccurrenceLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG,
    lambda loader, node: loader.construct_mapping(node, deep=True),
)
