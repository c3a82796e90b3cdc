"""
Reader for *.runtimeconfig.json files produced by `dotnet publish`.
"""

from __future__ import annotations

import glob
import json
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

from ..errors import RuntimeConfigError, RuntimeConfigNotFound

logger = logging.getLogger(__name__)

RUNTIME_CONFIG_SUFFIX = ".runtimeconfig.json"
RUNTIME_CONFIG_GLOB = "*" + RUNTIME_CONFIG_SUFFIX

NETCORE_FRAMEWORK = "Microsoft.NETCore.App"
ASPNETCORE_FRAMEWORK = "Microsoft.AspNetCore.App"

# Strings are matched first so comment markers inside them survive.
_COMMENT_RE = re.compile(r'("(?:\\.|[^"\\])*")|//[^\n]*|/\*.*?\*/', re.DOTALL)


@dataclass(frozen=True)
class RuntimeConfig:
    path: str = ""
    app_name: str = ""
    runtime_version: str = ""
    aspnet_version: str = ""
    executable: bool = False


def strip_json_comments(text: str) -> str:
    return _COMMENT_RE.sub(lambda m: m.group(1) or "", text)


def _frameworks(options: Dict[str, Any]) -> List[Dict[str, Any]]:
    frameworks: List[Dict[str, Any]] = []
    single = options.get("framework")
    if isinstance(single, dict):
        frameworks.append(single)
    many = options.get("frameworks")
    if isinstance(many, list):
        frameworks.extend(f for f in many if isinstance(f, dict))
    return frameworks


class RuntimeConfigParser:
    """Parse the single runtime config matching a glob."""

    def parse(self, pattern: str) -> RuntimeConfig:
        """
        Parse the runtime config matching pattern.

        Args:
            pattern: Glob such as /workspace/*.runtimeconfig.json

        Returns:
            RuntimeConfig: Parsed descriptor

        Raises:
            RuntimeConfigNotFound: If nothing matches the glob
            RuntimeConfigError: If several files match or the file is malformed
        """
        files = sorted(glob.glob(pattern))
        if not files:
            raise RuntimeConfigNotFound(f"no file matching {pattern}")
        if len(files) > 1:
            raise RuntimeConfigError(f"multiple *.runtimeconfig.json files present: {files}")

        path = files[0]
        try:
            text = Path(path).read_text(encoding="utf-8-sig")
        except OSError as e:
            raise RuntimeConfigError(f"failed to read {path}: {e}") from e

        data: Any = {}
        if text.strip():
            try:
                data = json.loads(strip_json_comments(text))
            except json.JSONDecodeError as e:
                raise RuntimeConfigError(f"failed to parse {path}: {e}") from e
        if not isinstance(data, dict):
            raise RuntimeConfigError(f"failed to parse {path}: expected a JSON object")

        options = data.get("runtimeOptions") or {}
        if not isinstance(options, dict):
            raise RuntimeConfigError(f"failed to parse {path}: runtimeOptions is not an object")

        runtime_version = ""
        aspnet_version = ""
        for framework in _frameworks(options):
            name = framework.get("name")
            version = str(framework.get("version") or "")
            if name == NETCORE_FRAMEWORK:
                runtime_version = version
            elif name == ASPNETCORE_FRAMEWORK:
                aspnet_version = version

        # ASP.NET Core ships on the runtime of the same version
        if not runtime_version and aspnet_version:
            runtime_version = aspnet_version

        app_name = os.path.basename(path)[: -len(RUNTIME_CONFIG_SUFFIX)]
        executable = os.path.isfile(os.path.join(os.path.dirname(path), app_name))

        if options.get("includedFrameworks"):
            logger.debug(f"{path} lists includedFrameworks; treating app as self-contained")

        return RuntimeConfig(
            path=path,
            app_name=app_name,
            runtime_version=runtime_version,
            aspnet_version=aspnet_version,
            executable=executable,
        )
