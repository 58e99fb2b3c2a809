#!/usr/bin/env python3
"""Enforce a coverage threshold on the parsing core.

Usage: check_coverage.py <coverage.json> (as written by ``pytest --cov-report=json``).
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

THRESHOLD = 90.0
TARGETS = (
    "src/gtp/tokenizer.py",
    "src/gtp/parser.py",
    "src/gtp/commands.py",
)


def _matches_target(filename: str) -> bool:
    return any(filename.endswith(target) for target in TARGETS)


def target_coverage(payload: dict[str, object]) -> float | None:
    """Return the combined line coverage of the target modules, or None."""
    files = payload.get("files", {})
    if not isinstance(files, dict):
        return None

    covered = 0
    statements = 0
    for filename, info in files.items():
        if not isinstance(filename, str) or not _matches_target(filename):
            continue
        if not isinstance(info, dict):
            continue
        summary = info.get("summary", {})
        if not isinstance(summary, dict):
            continue
        covered_lines = summary.get("covered_lines")
        num_statements = summary.get("num_statements")
        if isinstance(covered_lines, int) and isinstance(num_statements, int):
            covered += covered_lines
            statements += num_statements

    if statements == 0:
        return None
    return (covered / statements) * 100.0


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("usage: check_coverage.py <coverage.json>")
        return 2
    path = Path(args[0])
    if not path.exists():
        print(f"coverage file missing: {path}")
        return 2

    percent = target_coverage(json.loads(path.read_text()))
    if percent is None:
        print("no coverage data found for target modules")
        return 2
    print(f"parser core coverage: {percent:.2f}% (threshold {THRESHOLD:.2f}%)")
    if percent < THRESHOLD:
        print("coverage gate failed")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
