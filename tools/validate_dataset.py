#!/usr/bin/env python3
"""Validate Brickset dataset files against the published JSON schema."""

from __future__ import annotations

import argparse
import json
import sys
from collections import Counter
from pathlib import Path
from typing import Iterable

from jsonschema import Draft202012Validator, FormatChecker, ValidationError


def _load_json(path: Path, label: str) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise RuntimeError(f"Unable to read {label} {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise RuntimeError(f"{label.capitalize()} {path} is not valid JSON: {exc}") from exc


def _format_error_path(error: ValidationError) -> str:
    if not error.absolute_path:
        return "$"
    parts: Iterable[str] = ("$", *map(str, error.absolute_path))
    return ".".join(parts)


def _duplicate_numbers(records: list) -> list[str]:
    counts: Counter[str] = Counter(
        record["number"] for record in records if isinstance(record, dict) and isinstance(record.get("number"), str)
    )
    return [f"duplicate set number {number} ({count}x)" for number, count in sorted(counts.items()) if count > 1]


def validate_dataset(dataset_path: Path, schema_path: Path, fail_fast: bool) -> int:
    if not dataset_path.exists():
        print(f"[brickset] No dataset found at {dataset_path}", file=sys.stderr)
        return 2

    schema = _load_json(schema_path, "schema file")
    document = _load_json(dataset_path, "dataset")
    validator = Draft202012Validator(schema, format_checker=FormatChecker())

    errors: list[str] = []
    for error in sorted(validator.iter_errors(document), key=lambda e: list(map(str, e.absolute_path))):
        errors.append(f"{_format_error_path(error)}: {error.message}")
        if fail_fast:
            break

    if isinstance(document, list) and not (fail_fast and errors):
        errors.extend(_duplicate_numbers(document))

    total = len(document) if isinstance(document, list) else 0
    if errors:
        print(f"[FAIL] {dataset_path}", file=sys.stderr)
        for item in errors:
            print(f"  - {item}", file=sys.stderr)
        return 1

    themes: Counter[str] = Counter(record["theme"] for record in document)
    print(f"Validated {total} LEGO sets in {dataset_path}")
    print(f"  Themes: " + ", ".join(f"{theme}={count}" for theme, count in sorted(themes.items())))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Validate a Brickset dataset against the JSON schema.")
    parser.add_argument(
        "--dataset",
        type=Path,
        default=Path("data/brickset.json"),
        help="Dataset JSON file (default: data/brickset.json)",
    )
    parser.add_argument(
        "--schema",
        type=Path,
        default=Path("schemas/brickset.schema.json"),
        help="Path to dataset JSON schema",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop after the first validation failure",
    )

    args = parser.parse_args(argv)
    try:
        return validate_dataset(args.dataset, args.schema, args.fail_fast)
    except RuntimeError as exc:
        print(f"[brickset] {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
