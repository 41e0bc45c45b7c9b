"""Reporting façade: console summary and patch file."""

from .patch import build_patch, write_patch  # noqa: F401
from .summary import format_counts, format_results, print_results  # noqa: F401

__all__ = ["build_patch", "write_patch", "format_counts", "format_results", "print_results"]
