"""Flag hand-written guard clauses that a guardagainst function can replace.

A violation is a ``raise`` of one of the recognised exception types placed
directly in the body or ``else`` branch of an ``if`` statement. Raises inside
``except`` handlers are translations of another error, not guard clauses,
and are left alone.
"""
from __future__ import annotations

import ast
import sys
from pathlib import Path

from tools.guards import iter_python_files, parse, report

SUGGESTIONS: dict[str, str] = {
    "ValueError": "argument_being_invalid",
    "ArgumentError": "argument_being_invalid",
    "ArgumentNullError": "argument_being_null",
    "ArgumentOutOfRangeError": "argument_being_out_of_range",
    "RuntimeError": "operation_being_invalid",
    "InvalidOperationError": "operation_being_invalid",
}


def raised_name(node: ast.Raise) -> str | None:
    exc = node.exc.func if isinstance(node.exc, ast.Call) else node.exc
    if isinstance(exc, ast.Name):
        return exc.id
    if isinstance(exc, ast.Attribute):
        return exc.attr
    return None


def _handler_raises(tree: ast.AST) -> set[int]:
    return {
        id(inner)
        for handler in ast.walk(tree)
        if isinstance(handler, ast.ExceptHandler)
        for inner in ast.walk(handler)
        if isinstance(inner, ast.Raise)
    }


def check_path(path: Path) -> list[str]:
    _, tree = parse(path)
    skipped = _handler_raises(tree)
    errors: list[str] = []
    for node in ast.walk(tree):
        if not isinstance(node, ast.If):
            continue
        for stmt in [*node.body, *node.orelse]:
            if not isinstance(stmt, ast.Raise) or id(stmt) in skipped:
                continue
            name = raised_name(stmt)
            if name is not None and name in SUGGESTIONS:
                errors.append(
                    f"{path}:{stmt.lineno} consider {SUGGESTIONS[name]}() "
                    f"instead of raising {name}"
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
