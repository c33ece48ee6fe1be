from __future__ import annotations

import ast
import sys
from pathlib import Path

from tools.guards import iter_python_files, parse, report


def check_path(path: Path) -> list[str]:
    _, tree = parse(path)
    return [
        f"{path}:{node.lineno} use logger; 'print' is forbidden"
        for node in ast.walk(tree)
        if isinstance(node, ast.Call)
        and isinstance(node.func, ast.Name)
        and node.func.id == "print"
    ]


def run(roots: list[str]) -> int:
    errors: list[str] = []
    for path in iter_python_files(roots):
        errors.extend(check_path(path))
    return report(errors)


def main() -> int:
    return run(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
