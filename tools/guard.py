"""Run the repository guards.

    python -m tools.guard                      # every guard over the default roots
    python -m tools.guard --only raise tests   # selected guards over given roots

Exits with the first non-zero guard status.
"""
from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from tools.guards import exceptions_guard, logging_guard, raise_guard, typing_guard

Runner = Callable[[list[str]], int]

GUARDS: dict[str, Runner] = {
    "typing": typing_guard.run,
    "exceptions": exceptions_guard.run,
    "logging": logging_guard.run,
    "raise": raise_guard.run,
}
DEFAULT_ROOTS = ["guardagainst", "tests", "tools"]


def run_guards(roots: list[str], names: Sequence[str] | None = None) -> int:
    for name in names or list(GUARDS):
        rc = GUARDS[name](roots)
        if rc != 0:
            return rc
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tools.guard")
    parser.add_argument(
        "--only",
        action="append",
        choices=sorted(GUARDS),
        help="run only this guard; repeat to select several",
    )
    parser.add_argument("roots", nargs="*", default=DEFAULT_ROOTS)
    args = parser.parse_args(argv)
    return run_guards(list(args.roots), args.only)


if __name__ == "__main__":
    raise SystemExit(main())
