from __future__ import annotations

import ast
import sys
import tokenize
from io import StringIO
from pathlib import Path

from tools.guards import iter_python_files, parse, report

FORBIDDEN_NAMES = {"Any", "cast"}
IGNORE_MARKER = "type: " + "ignore"


def _forbidden(node: ast.AST) -> str | None:
    if isinstance(node, ast.ImportFrom) and node.module == "typing":
        names = [a.name for a in node.names if a.name in FORBIDDEN_NAMES]
        return f"forbidden typing import {names[0]!r}" if names else None
    if (
        isinstance(node, ast.Attribute)
        and isinstance(node.value, ast.Name)
        and node.value.id == "typing"
        and node.attr in FORBIDDEN_NAMES
    ):
        return f"forbidden use of typing.{node.attr}"
    if isinstance(node, ast.Name) and node.id in FORBIDDEN_NAMES:
        return f"forbidden name {node.id!r}"
    return None


def check_path(path: Path) -> list[str]:
    text, tree = parse(path)
    errors: list[str] = []
    for node in ast.walk(tree):
        problem = _forbidden(node)
        if problem is not None:
            errors.append(f"{path}:{getattr(node, 'lineno', 0)} {problem}")

    # Comments only; string literals that mention the marker are fine.
    errors.extend(
        f"{path}:{tok.start[0]} forbidden '{IGNORE_MARKER}'"
        for tok in tokenize.generate_tokens(StringIO(text).readline)
        if tok.type == tokenize.COMMENT and IGNORE_MARKER in tok.string
    )
    return errors


def run(roots: list[str]) -> int:
    errors: list[str] = []
    for path in iter_python_files(roots):
        errors.extend(check_path(path))
    return report(errors)


def main() -> int:
    return run(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
