"""CLI handlers facade.

Thin wrapper that re-exports concrete handler implementations so that
`cli.handlers.handle_*` stays the one place dispatch looks at.
"""
from __future__ import annotations

from typing import Any

from .core_handlers_results import handle_build_root, handle_dry_run, handle_run

HELP_TEXT = """rewrite-report: classify and report automated refactoring results

  dry-run MANIFEST   report changes, write target/rewrite/rewrite.patch
  run MANIFEST       report changes, write them, remove emptied directories
  build-root MANIFEST
                     print build root and repository root

Exit status is 1 when the engine embedded an error in any transformed file.
"""


def handle_help(parser: Any) -> int:
    print(HELP_TEXT)
    return 0


__all__ = ["handle_help", "handle_dry_run", "handle_run", "handle_build_root"]
