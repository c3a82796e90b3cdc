"""
Software bill of materials for the compiled app.

Only a small inventory is produced here: the libraries listed in the
*.deps.json files that `dotnet publish` writes next to the app.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Protocol

from .analyzer.runtime_config import strip_json_comments
from .analyzer.walk import match_files
from .errors import SBOMError

logger = logging.getLogger(__name__)


class SBOMGenerator(Protocol):
    def generate(self, path: str) -> Dict[str, Any]:
        ...


class DepsJSONGenerator:
    """Build an SBOM from the *.deps.json files in a workspace."""

    def generate(self, path: str) -> Dict[str, Any]:
        components: List[Dict[str, str]] = []
        sources: List[str] = []
        for deps_file in match_files(path, ["*.deps.json"]):
            sources.append(deps_file.name)
            components.extend(self._components(deps_file))

        components.sort(key=lambda c: (c["name"].lower(), c["version"]))
        return {
            "format": "dotnet-deps",
            "sources": sources,
            "components": components,
        }

    def _components(self, deps_file: Path) -> List[Dict[str, str]]:
        try:
            data = json.loads(strip_json_comments(deps_file.read_text(encoding="utf-8-sig")))
        except json.JSONDecodeError as e:
            raise SBOMError(f"failed to parse {deps_file.name}: {e}") from e

        libraries = data.get("libraries") if isinstance(data, dict) else None
        if not isinstance(libraries, dict):
            logger.debug(f"{deps_file.name} lists no libraries")
            return []

        components = []
        for key, info in libraries.items():
            name, _, version = key.partition("/")
            kind = info.get("type", "") if isinstance(info, dict) else ""
            components.append({"name": name, "version": version, "type": kind})
        return components
