"""Recipe descriptors: lookup, validation and change attribution logging."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Sequence

from rewrite_report.errors import RecipeNotFoundError, RecipeValidationError

RECIPE_NOT_FOUND_MSG = "Could not find recipe '%s' among available recipes"
INDENT = "    "

_log = logging.getLogger("rewrite_report.recipes")


@dataclass
class ValidationFailure:
    """An option validation failure reported by the engine for one recipe."""

    property: str
    message: str


@dataclass
class RecipeDescriptor:
    name: str
    display_name: str = ""
    options: Dict[str, Any] = field(default_factory=dict)
    recipe_list: List["RecipeDescriptor"] = field(default_factory=list)
    errors: List[ValidationFailure] = field(default_factory=list)

    def walk(self) -> Iterator["RecipeDescriptor"]:
        """This recipe and every nested one, depth-first."""
        stack = [self]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.recipe_list))


def get_recipe_descriptor(name: str, descriptors: Iterable[RecipeDescriptor]) -> RecipeDescriptor:
    """Case-insensitive lookup by recipe name."""
    wanted = name.lower()
    for descriptor in descriptors:
        if descriptor.name.lower() == wanted:
            return descriptor
    raise RecipeNotFoundError(RECIPE_NOT_FOUND_MSG % name)


def activate_recipes(names: Sequence[str], descriptors: Sequence[RecipeDescriptor]) -> List[RecipeDescriptor]:
    return [get_recipe_descriptor(n, descriptors) for n in names]


def validate_recipes(active: Sequence[RecipeDescriptor], *, fail_on_invalid: bool) -> List[ValidationFailure]:
    """Log validation failures of active recipes; raise if configured to stop."""
    failures = [f for root in active for d in root.walk() for f in d.errors]
    for failure in failures:
        _log.error("Recipe validation error in %s: %s", failure.property, failure.message)
    if failures:
        if fail_on_invalid:
            raise RecipeValidationError(
                "Recipe validation errors detected as part of one or more activeRecipe(s). Please check error logs."
            )
        _log.error("Recipe validation errors detected as part of one or more activeRecipe(s). Execution will continue regardless.")
    return failures


def _format_options(options: Dict[str, Any]) -> str:
    return ", ".join(f"{k}={v}" for k, v in options.items() if v is not None)


def recipe_lines(descriptor: RecipeDescriptor, prefix: str = INDENT) -> List[str]:
    """Recipe chain as indented lines: 'name: {opt=value, ...}'."""
    lines: List[str] = []
    stack = [(descriptor, prefix)]
    while stack:
        current, pad = stack.pop()
        line = pad + current.name
        opts = _format_options(current.options)
        if opts:
            line += ": {" + opts + "}"
        lines.append(line)
        stack.extend((child, pad + INDENT) for child in reversed(current.recipe_list))
    return lines


def changed_by_lines(recipe_names: Sequence[str], descriptors: Sequence[RecipeDescriptor]) -> List[str]:
    """
    Lines naming the recipes that made a change, each one nested under the previous.

    Unknown names still get a line, without options.
    """
    lines: List[str] = []
    prefix = INDENT
    for name in recipe_names:
        try:
            descriptor = get_recipe_descriptor(name, descriptors)
        except RecipeNotFoundError:
            descriptor = RecipeDescriptor(name=name)
        lines.extend(recipe_lines(descriptor, prefix))
        prefix += INDENT
    return lines
