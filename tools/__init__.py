"""Repository tooling for guardagainst.

Guard scripts here enforce the standards the library itself is written to:
- No typing.Any, casts or "type: ignore" comments
- No bare except, and every handler re-raises
- No print; use logging
- No hand-written `if ...: raise ValueError(...)` where a guard function fits

Run them all with `python -m tools.guard`, or pick some with `--only NAME`.
"""
