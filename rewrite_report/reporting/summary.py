"""Human-readable summary of a results container."""

from __future__ import annotations

from typing import List, Sequence

from rich.console import Console
from rich.markup import escape

from rewrite_report.recipes import RecipeDescriptor, changed_by_lines
from rewrite_report.results import ResultsContainer, TransformationResult


def _headline(category: str, result: TransformationResult) -> str:
    if category == "generated":
        return f"Generated new file {result.require_after().source_path.as_posix()} by:"
    if category == "deleted":
        return f"Deleted file {result.require_before().source_path.as_posix()} by:"
    if category == "moved":
        return (
            f"File has been moved from {result.require_before().source_path.as_posix()} "
            f"to {result.require_after().source_path.as_posix()} by:"
        )
    return f"Changes have been made to {result.require_before().source_path.as_posix()} by:"


def format_results(container: ResultsContainer, descriptors: Sequence[RecipeDescriptor] = ()) -> List[str]:
    """One headline per result followed by the recipe chain that caused it."""
    lines: List[str] = []
    for category, results in container.categories():
        for result in results:
            lines.append(_headline(category, result))
            lines.extend(changed_by_lines(result.recipes, descriptors))
    return lines


def format_counts(container: ResultsContainer) -> str:
    c = container.counts()
    return (
        f"generated: {c['generated']}, deleted: {c['deleted']}, "
        f"moved: {c['moved']}, changed: {c['refactored_in_place']}"
    )


def print_results(
    container: ResultsContainer,
    descriptors: Sequence[RecipeDescriptor] = (),
    *,
    console: Console | None = None,
) -> None:
    console = console or Console()
    if not container.is_not_empty():
        console.print("[green]No changes.[/green]")
        return
    for line in format_results(container, descriptors):
        if line.startswith(" "):
            console.print(escape(line), style="dim")
        else:
            console.print(escape(line), style="yellow")
    console.print(escape(format_counts(container)), style="bold")
