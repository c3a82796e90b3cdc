from __future__ import annotations

import logging
from pathlib import Path

import yaml

from ..config import PROJECT_PATH_ENV
from ..errors import BuildpackYMLError

logger = logging.getLogger(__name__)


class BuildpackYMLParser:
    """Legacy buildpack.yml support: only dotnet-build.project-path is read."""

    def parse_project_path(self, path: str) -> str:
        p = Path(path)
        if not p.exists():
            return ""

        try:
            data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as e:
            raise BuildpackYMLError(f"failed to parse buildpack.yml: {e}") from e

        if not isinstance(data, dict):
            raise BuildpackYMLError("failed to parse buildpack.yml: expected a mapping")

        section = data.get("dotnet-build") or {}
        if not isinstance(section, dict):
            raise BuildpackYMLError("failed to parse buildpack.yml: dotnet-build is not a mapping")

        project_path = section.get("project-path") or ""
        if project_path:
            logger.warning(
                f"Setting the project path through buildpack.yml is deprecated; use {PROJECT_PATH_ENV} instead"
            )
        return str(project_path)
