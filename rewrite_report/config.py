"""
Run configuration.

Precedence (low to high): defaults, [tool.rewrite_report] in the project's
pyproject.toml, REWRITE_REPORT_* environment variables, CLI flags.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

from rewrite_report.errors import ConfigError

ENV_PREFIX = "REWRITE_REPORT_"
DEFAULT_ARTIFACT_CACHE = Path("~/.m2/repository").expanduser()
DEFAULT_PATCH_FILE = Path("target/rewrite/rewrite.patch")

_TRUE = {"1", "true", "yes", "on"}


@dataclass
class ReportConfig:
    active_recipes: List[str] = field(default_factory=list)
    active_styles: List[str] = field(default_factory=list)
    artifact_cache: Optional[Path] = None
    fail_on_invalid_active_recipes: bool = False
    patch_file: Path = DEFAULT_PATCH_FILE

    def with_overrides(self, **overrides: Any) -> "ReportConfig":
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def split_list(raw: Any) -> List[str]:
    if isinstance(raw, (list, tuple)):
        return [str(x).strip() for x in raw if str(x).strip()]
    return [part.strip() for part in str(raw or "").split(",") if part.strip()]


def _as_bool(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() in _TRUE


def _from_mapping(data: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    if "active_recipes" in data:
        out["active_recipes"] = split_list(data["active_recipes"])
    if "active_styles" in data:
        out["active_styles"] = split_list(data["active_styles"])
    if data.get("artifact_cache"):
        out["artifact_cache"] = Path(str(data["artifact_cache"])).expanduser()
    if "fail_on_invalid_active_recipes" in data:
        out["fail_on_invalid_active_recipes"] = _as_bool(data["fail_on_invalid_active_recipes"])
    if data.get("patch_file"):
        out["patch_file"] = Path(str(data["patch_file"]))
    return out


def read_pyproject_section(project_root: Path) -> Dict[str, Any]:
    """[tool.rewrite_report] table of project_root/pyproject.toml, or {}."""
    pyproject = Path(project_root) / "pyproject.toml"
    if not pyproject.is_file():
        return {}
    try:
        with pyproject.open("rb") as fh:
            data = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"cannot read config {pyproject}: {e}") from e
    section = data.get("tool", {}).get("rewrite_report", {})
    return section if isinstance(section, dict) else {}


def read_env(environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    env = os.environ if environ is None else environ
    return {
        key[len(ENV_PREFIX):].lower(): value
        for key, value in env.items()
        if key.startswith(ENV_PREFIX) and value.strip()
    }


def load_config(project_root: Path, environ: Optional[Dict[str, str]] = None) -> ReportConfig:
    """Defaults, then pyproject, then environment."""
    config = ReportConfig()
    config = config.with_overrides(**_from_mapping(read_pyproject_section(project_root)))
    config = config.with_overrides(**_from_mapping(read_env(environ)))
    return config
