"""dry-run / run / build-root handlers."""

from __future__ import annotations

from typing import Any

from rich.console import Console

from rewrite_report.apply import apply_results
from rewrite_report.errors import RewriteReportError
from rewrite_report.reporting import print_results, write_patch

from .core_handlers_common import _check_path, _clog, _err, _load, _warn


def _list(args: Any):
    from cli.orchestration import list_results

    manifest, config = _load(args)
    return manifest, config, list_results(manifest, config)


def _failed(listed: Any) -> bool:
    first = listed.container.first_exception()
    if first is None:
        return False
    _err(f"recipe run failed: {first.detail}")
    return True


def handle_dry_run(args: Any) -> int:
    """Report what the run would change and write the patch file."""
    if _check_path(args.manifest) != 0:
        return 1
    try:
        manifest, config, listed = _list(args)
    except RewriteReportError as e:
        _err(str(e))
        return 1
    if _failed(listed):
        return 1
    container = listed.container
    print_results(container, manifest.recipes, console=Console())
    if container.is_not_empty():
        patch = write_patch(container, config.patch_file)
        _warn(f"Report available: {patch}")
        _warn("Run 'rewrite-report run' to apply the changes.")
    return 0


def handle_run(args: Any) -> int:
    """Report, apply changes to the working tree, remove emptied directories."""
    if _check_path(args.manifest) != 0:
        return 1
    try:
        manifest, _config, listed = _list(args)
    except RewriteReportError as e:
        _err(str(e))
        return 1
    if _failed(listed):
        return 1
    container = listed.container
    print_results(container, manifest.recipes, console=Console())
    if not container.is_not_empty():
        return 0
    report = apply_results(container)
    for msg in report["cleanup_errors"]:
        _warn(f"could not remove empty directory {msg}")
    for removed in report["removed_dirs"]:
        _clog().info("rewrite-report: removed empty directory %s", removed)
    if report["errors"]:
        for msg in report["errors"]:
            _err(msg)
        return 1
    return 0


def handle_build_root(args: Any) -> int:
    """Print build root and repository root."""
    if _check_path(args.manifest) != 0:
        return 1
    from cli.orchestration import resolve_roots

    try:
        manifest, config = _load(args)
        roots = resolve_roots(manifest, config)
    except RewriteReportError as e:
        _err(str(e))
        return 1
    print(f"build root:      {roots.build_root}")
    print(f"repository root: {roots.repository_root}")
    return 0
