"""
Result listing pipeline.

resolve roots → active recipes → validate → drop generated sources → classify.
The engine run itself happened upstream; its output arrives as a RunManifest.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from rewrite_report.config import DEFAULT_ARTIFACT_CACHE, ReportConfig
from rewrite_report.manifest import RunManifest
from rewrite_report.project import find_repository_root, resolve_build_root
from rewrite_report.recipes import RecipeDescriptor, activate_recipes, validate_recipes
from rewrite_report.results import Generated, ResultsContainer, TransformationResult

from .logging import get_logger

NO_RECIPES_HINT = (
    "No recipes were activated. "
    "Activate a recipe with active_recipes = [\"com.fully.qualified.RecipeName\"] under [tool.rewrite_report] in pyproject.toml, "
    "or with REWRITE_REPORT_ACTIVE_RECIPES=com.fully.qualified.RecipeName"
)


@dataclass
class Roots:
    build_root: Path
    repository_root: Path


@dataclass
class ListedResults:
    container: ResultsContainer
    active: List[RecipeDescriptor]
    roots: Roots


def resolve_roots(manifest: RunManifest, config: ReportConfig) -> Roots:
    cache = config.artifact_cache or manifest.artifact_cache or DEFAULT_ARTIFACT_CACHE
    build_root = resolve_build_root(manifest.projects, cache, manifest.execution_root)
    return Roots(build_root=build_root, repository_root=find_repository_root(build_root))


def drop_generated(results: List[TransformationResult]) -> List[TransformationResult]:
    """Drop results whose before source is marked as machine-generated."""
    kept: List[TransformationResult] = []
    for result in results:
        if result.before is not None and result.before.tree.find_first(Generated) is not None:
            get_logger("pipeline").debug("rewrite-report: skipping generated source %s", result.before.source_path)
            continue
        kept.append(result)
    return kept


def list_results(manifest: RunManifest, config: ReportConfig) -> ListedResults:
    """Classify the manifest's results under the repository root."""
    log = get_logger("pipeline")
    roots = resolve_roots(manifest, config)
    log.info("Using active recipe(s) %s", config.active_recipes)
    log.info("Using active styles(s) %s", config.active_styles)
    if not config.active_recipes:
        log.warning(NO_RECIPES_HINT)
        return ListedResults(ResultsContainer(roots.repository_root, []), [], roots)

    active = activate_recipes(config.active_recipes, manifest.recipes)
    log.info("Validating active recipes...")
    validate_recipes(active, fail_on_invalid=config.fail_on_invalid_active_recipes)

    results = drop_generated(manifest.results)
    container = ResultsContainer(roots.repository_root, results)
    return ListedResults(container, active, roots)
