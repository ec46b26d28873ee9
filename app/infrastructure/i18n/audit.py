"""Locale auditing: parse validation, coverage and source key scanning.

Used by the ``campus-i18n`` command and by tests that assert every key
referenced in templates exists in at least one locale.
"""

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Set, Union

from infrastructure.i18n.loader import error_snippet
from infrastructure.i18n.models import LocaleTable
from infrastructure.i18n.sanitation import find_duplicate_keys, first_occurrence_pairs

TableLike = Union[LocaleTable, Mapping[str, Any]]

KEY_CALL_PATTERN = re.compile(r"""\bt\(\s*['"`]([^'"`]+)['"`]\s*(?:,|\))""")
VALID_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.:-]+$")
DEFAULT_SOURCE_EXTENSIONS = (".py", ".html", ".jinja", ".j2", ".ts", ".tsx", ".js", ".jsx")


def _entries(node: TableLike) -> Mapping[str, Any]:
    return node.entries if isinstance(node, LocaleTable) else node


def _is_branch(value: Any) -> bool:
    return isinstance(value, (LocaleTable, Mapping))


def collect_values(node: TableLike, prefix: str = "") -> Dict[str, Any]:
    """Flatten a nested table into ``{dotted_key: leaf}``. Lists are leaves."""
    values: Dict[str, Any] = {}
    for key, value in _entries(node).items():
        path = f"{prefix}.{key}" if prefix else key
        if _is_branch(value):
            values.update(collect_values(value, path))
        else:
            values[path] = value
    return values


def collect_keys(node: TableLike, prefix: str = "") -> List[str]:
    """Dotted paths of every leaf, in document order."""
    return list(collect_values(node, prefix))


@dataclass
class CoverageReport:
    """Keys of a reference locale that a target locale lacks or leaves blank."""

    missing: List[str] = field(default_factory=list)
    empty: List[str] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.missing and not self.empty


def compare_locales(reference: TableLike, target: TableLike) -> CoverageReport:
    """Compare ``target`` against the keys of ``reference``."""
    target_values = collect_values(target)
    report = CoverageReport()
    for key in collect_keys(reference):
        if key not in target_values:
            report.missing.append(key)
        elif target_values[key] == "":
            report.empty.append(key)
    return report


@dataclass
class ValidationResult:
    """Outcome of validating one locale file."""

    path: Path
    ok: bool
    error: Optional[str] = None
    snippet: Optional[str] = None
    warnings: List[str] = field(default_factory=list)


def validate_locale_file(path: Path) -> ValidationResult:
    """Check that a JSON locale file parses into a well-formed table."""
    path = Path(path)
    content = path.read_text(encoding="utf-8")
    try:
        data = json.loads(content, object_pairs_hook=first_occurrence_pairs)
    except json.JSONDecodeError as e:
        return ValidationResult(
            path=path,
            ok=False,
            error=str(e),
            snippet=error_snippet(content, e.pos),
        )

    if not isinstance(data, dict):
        return ValidationResult(path=path, ok=False, error="top-level value is not an object")

    result = ValidationResult(path=path, ok=True)
    for duplicate in find_duplicate_keys(content):
        result.warnings.append(f"duplicate key: {duplicate}")
    for key, value in collect_values(data).items():
        if not isinstance(value, str):
            result.warnings.append(f"non-string value: {key} ({type(value).__name__})")
    return result


def validate_locale_files(directory: Path) -> List[ValidationResult]:
    """Validate every ``*.json`` file in ``directory``, sorted by name."""
    return [validate_locale_file(path) for path in sorted(Path(directory).glob("*.json"))]


def extract_translation_keys(source: str) -> List[str]:
    """Find literal keys passed to ``t(...)`` in source text.

    Only quoted literals count. Candidates that do not look like keys
    (single characters, bare numbers, template fragments) are skipped.
    """
    keys = []
    for match in KEY_CALL_PATTERN.finditer(source):
        key = match.group(1).strip()
        if (
            len(key) > 1
            and VALID_KEY_PATTERN.match(key)
            and not key.isdigit()
            and "${" not in key
        ):
            keys.append(key)
    return keys


def scan_source_tree(
    root: Path, extensions: Sequence[str] = DEFAULT_SOURCE_EXTENSIONS
) -> Set[str]:
    """Collect translation keys used by every source file under ``root``."""
    keys: Set[str] = set()
    for path in sorted(Path(root).rglob("*")):
        if path.is_file() and path.suffix in extensions:
            keys.update(extract_translation_keys(path.read_text(encoding="utf-8")))
    return keys


def has_key(node: TableLike, key: str) -> bool:
    """True when ``key`` walks to any value, leaf or nested table."""
    current: Any = node
    for segment in key.split("."):
        entries = _entries(current) if _is_branch(current) else None
        if entries is None or segment not in entries:
            return False
        current = entries[segment]
    return True


def find_undefined_keys(
    keys: Iterable[str],
    tables: Sequence[TableLike],
    prefixes: Optional[Sequence[str]] = None,
) -> List[str]:
    """Keys that exist in none of ``tables``, sorted.

    Args:
        keys: Keys referenced by source code.
        tables: Locale tables to check.
        prefixes: Only check keys starting with one of these prefixes.
    """
    selected = [
        key
        for key in keys
        if not prefixes or any(key.startswith(prefix) for prefix in prefixes)
    ]
    return sorted(
        key for key in set(selected) if not any(has_key(table, key) for table in tables)
    )

