"""Repository guard runners.

Each guard exposes `run(roots: list[str]) -> int`, non-zero on violations.
"""
from __future__ import annotations

import ast
import sys
from collections.abc import Iterable
from pathlib import Path


def iter_python_files(roots: Iterable[str]) -> Iterable[Path]:
    for root in roots:
        base = Path(root)
        if base.is_file() and base.suffix == ".py":
            yield base
        elif base.is_dir():
            yield from sorted(base.rglob("*.py"))


def parse(path: Path) -> tuple[str, ast.Module]:
    text = path.read_text(encoding="utf-8")
    try:
        tree = ast.parse(text, filename=str(path))
    except SyntaxError as exc:
        sys.stderr.write(f"{path}: PARSE_ERROR {exc}\n")
        raise
    return text, tree


def report(errors: list[str]) -> int:
    if errors:
        sys.stderr.write("\n".join(errors) + "\n")
        return 1
    return 0
