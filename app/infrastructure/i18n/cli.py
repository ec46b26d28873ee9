"""Command-line tools for locale resources.

Usage:
    campus-i18n validate app/locales
    campus-i18n clean app/locales/ar.json
    campus-i18n coverage app/locales --reference en --target ar
    campus-i18n scan templates/ app/locales --prefix pp.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from infrastructure.i18n.audit import (
    compare_locales,
    find_undefined_keys,
    scan_source_tree,
    validate_locale_files,
)
from infrastructure.i18n.loader import JSONTranslationLoader
from infrastructure.i18n.sanitation import clean_locale_file


def _validate(args: argparse.Namespace) -> int:
    results = validate_locale_files(args.directory)
    if not results:
        print(f"No locale files found in {args.directory}", file=sys.stderr)
        return 1

    ok = True
    for result in results:
        if result.ok:
            print(f"{result.path.name}: OK")
        else:
            ok = False
            print(f"{result.path.name}: ERROR -> {result.error}", file=sys.stderr)
            if result.snippet is not None:
                print("--- snippet ---", file=sys.stderr)
                print(result.snippet, file=sys.stderr)
                print("--- end snippet ---", file=sys.stderr)
        for warning in result.warnings:
            print(f"{result.path.name}: WARNING {warning}")
    return 0 if ok else 1


def _clean(args: argparse.Namespace) -> int:
    removed = clean_locale_file(args.file, force=args.force)
    if removed:
        print(f"✅ Removed {len(removed)} duplicate key(s) from {args.file}")
        for key in removed:
            print(f"  - {key}")
    else:
        print(f"✅ No duplicate keys in {args.file}")
    return 0


def _coverage(args: argparse.Namespace) -> int:
    loader = JSONTranslationLoader(args.directory, use_cache=False)
    report = compare_locales(loader.load(args.reference), loader.load(args.target))

    print(f"Locale scan summary: {args.target} against {args.reference}")
    print("--------------------------------")
    print(f"Missing keys: {len(report.missing)}")
    print(f"Empty values: {len(report.empty)}")
    if report.missing:
        print(f"Sample missing (first {args.limit}):")
        for key in report.missing[: args.limit]:
            print(f"  {key}")
    if report.empty:
        print(f"Sample empty (first {args.limit}):")
        for key in report.empty[: args.limit]:
            print(f"  {key}")
    return 0 if report.is_complete else 1


def _scan(args: argparse.Namespace) -> int:
    loader = JSONTranslationLoader(args.directory, use_cache=False)
    tables = list(loader.load_all(args.locales).values())
    keys = scan_source_tree(args.source)
    undefined = find_undefined_keys(keys, tables, prefixes=args.prefix or None)

    if undefined:
        print(
            f"Missing translation keys (showing up to {args.limit}):",
            file=sys.stderr,
        )
        for key in undefined[: args.limit]:
            print(f"  {key}: {','.join(args.locales)}", file=sys.stderr)
        print(f"Total missing: {len(undefined)}", file=sys.stderr)
        return 1

    print(f"✅ All {len(keys)} referenced key(s) are defined")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="campus-i18n", description="Locale resource tooling"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="check that locale files parse")
    validate.add_argument("directory", type=Path)
    validate.set_defaults(handler=_validate)

    clean = subparsers.add_parser("clean", help="remove duplicate keys from a file")
    clean.add_argument("file", type=Path)
    clean.add_argument("--force", action="store_true", help="rewrite even when clean")
    clean.set_defaults(handler=_clean)

    coverage = subparsers.add_parser("coverage", help="report missing and empty keys")
    coverage.add_argument("directory", type=Path)
    coverage.add_argument("--reference", default="en")
    coverage.add_argument("--target", default="ar")
    coverage.add_argument("--limit", type=int, default=30)
    coverage.set_defaults(handler=_coverage)

    scan = subparsers.add_parser("scan", help="find t() keys missing from all locales")
    scan.add_argument("source", type=Path)
    scan.add_argument("directory", type=Path)
    scan.add_argument("--locales", nargs="+", default=["en", "ar"])
    scan.add_argument("--prefix", action="append", default=[])
    scan.add_argument("--limit", type=int, default=20)
    scan.set_defaults(handler=_scan)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
