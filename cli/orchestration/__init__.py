"""Run orchestration: logging setup and the result listing pipeline."""

from .pipeline import ListedResults, Roots, list_results, resolve_roots

__all__ = ["ListedResults", "Roots", "list_results", "resolve_roots"]
