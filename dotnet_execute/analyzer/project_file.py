"""
Reader for MSBuild project files (*.csproj, *.fsproj, *.vbproj).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List
from xml.etree import ElementTree

from ..errors import ProjectFileError
from .walk import find_first

PROJECT_PATTERNS = ["*.csproj", "*.fsproj", "*.vbproj"]

WEB_SDK = "Microsoft.NET.Sdk.Web"
ASPNETCORE_REFERENCES = {"Microsoft.AspNetCore.App", "Microsoft.AspNetCore.All"}

TARGET_FRAMEWORK_RE = re.compile(r"^net(?:coreapp)?(\d+\.\d+)(?:-[\w.]+)?$")
NODE_COMMAND_RE = re.compile(r"(^|[\s&;|])(node|npm|npx|yarn)(\s|$)")


@dataclass(frozen=True)
class ProjectInfo:
    project_file: str = ""
    version: str = ""
    requires_aspnet: bool = False
    requires_node: bool = False


def _local(tag: str) -> str:
    # older project files carry the msbuild XML namespace
    return tag.rsplit("}", 1)[-1]


def _iter(root: ElementTree.Element, name: str) -> Iterator[ElementTree.Element]:
    for element in root.iter():
        if isinstance(element.tag, str) and _local(element.tag) == name:
            yield element


class ProjectFileParser:
    def find_project_file(self, root: str) -> str:
        found = find_first(root, PROJECT_PATTERNS)
        return str(found) if found else ""

    def _load(self, path: str) -> ElementTree.Element:
        try:
            return ElementTree.parse(path).getroot()
        except ElementTree.ParseError as e:
            raise ProjectFileError(f"failed to parse {Path(path).name}: {e}") from e
        except OSError as e:
            raise ProjectFileError(f"failed to read {path}: {e}") from e

    def parse_version(self, path: str) -> str:
        """Runtime version implied by the TargetFramework, e.g. net6.0 -> 6.0.0."""
        root = self._load(path)
        candidates: List[str] = []
        for name in ("TargetFramework", "TargetFrameworks"):
            for element in _iter(root, name):
                candidates.extend(t.strip() for t in (element.text or "").split(";"))

        for candidate in candidates:
            match = TARGET_FRAMEWORK_RE.match(candidate)
            if match:
                return f"{match.group(1)}.0"

        raise ProjectFileError(
            f"failed to find version in {Path(path).name}: missing or invalid TargetFramework property"
        )

    def aspnet_is_required(self, path: str) -> bool:
        root = self._load(path)
        if WEB_SDK in (s.strip() for s in (root.get("Sdk") or "").split(";")):
            return True
        for element in _iter(root, "Sdk"):
            if element.get("Name") == WEB_SDK:
                return True
        for name in ("FrameworkReference", "PackageReference"):
            for element in _iter(root, name):
                if element.get("Include") in ASPNETCORE_REFERENCES:
                    return True
        return False

    def node_is_required(self, path: str) -> bool:
        root = self._load(path)
        for element in _iter(root, "Exec"):
            if NODE_COMMAND_RE.search(element.get("Command") or ""):
                return True
        return False

    def parse(self, path: str) -> ProjectInfo:
        return ProjectInfo(
            project_file=path,
            version=self.parse_version(path),
            requires_aspnet=self.aspnet_is_required(path),
            requires_node=self.node_is_required(path),
        )
