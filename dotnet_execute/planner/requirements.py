"""
Requirement plan for the detect phase.

The plan tells the orchestrator which runtime components the image needs.
Entries are appended in a fixed order and never removed: ICU, the
live-reload watcher, requirements read from the runtime config, then
requirements read from the project file. The same name may appear twice
(once per source); merging is left to the orchestrator.
"""

from __future__ import annotations

import logging
import os
from typing import List

from ..analyzer.project_file import ProjectInfo
from ..analyzer.runtime_config import RuntimeConfig
from ..config import Configuration
from ..errors import DetectionFailed
from .plan import BuildPlan, Requirement, RequirementMetadata
from .sdk_version import get_sdk_version

logger = logging.getLogger(__name__)

RUNTIME_CONFIG_SOURCE = "runtimeconfig.json"


def _runtime_config_requirements(runtime_config: RuntimeConfig) -> List[Requirement]:
    # FDD and FDE apps; self-contained apps carry no version
    requirements: List[Requirement] = [
        Requirement(
            "dotnet-runtime",
            RequirementMetadata(
                version=runtime_config.runtime_version,
                version_source=RUNTIME_CONFIG_SOURCE,
                launch=True,
            ),
        )
    ]

    # only FDDs need the SDK, which provides the dotnet host
    if not runtime_config.executable:
        requirements.append(
            Requirement(
                "dotnet-sdk",
                RequirementMetadata(
                    version=get_sdk_version(runtime_config.runtime_version),
                    version_source=RUNTIME_CONFIG_SOURCE,
                ),
            )
        )

    if runtime_config.aspnet_version:
        requirements.append(
            Requirement(
                "dotnet-aspnetcore",
                RequirementMetadata(
                    version=runtime_config.aspnet_version,
                    version_source=RUNTIME_CONFIG_SOURCE,
                    launch=True,
                ),
            )
        )
    return requirements


def _project_requirements(project: ProjectInfo) -> List[Requirement]:
    source = os.path.basename(project.project_file)
    requirements: List[Requirement] = [
        Requirement("dotnet-application", RequirementMetadata(launch=True)),
        Requirement(
            "dotnet-runtime",
            RequirementMetadata(version=project.version, version_source=source, launch=True),
        ),
        Requirement(
            "dotnet-sdk",
            RequirementMetadata(version=get_sdk_version(project.version), version_source=source),
        ),
    ]

    if project.requires_aspnet:
        requirements.append(
            Requirement(
                "dotnet-aspnetcore",
                RequirementMetadata(version=project.version, version_source=source, launch=True),
            )
        )

    if project.requires_node:
        requirements.append(
            Requirement("node", RequirementMetadata(version_source=source, launch=True))
        )
    return requirements


def build_requirement_plan(
    config: Configuration,
    runtime_config: RuntimeConfig,
    project: ProjectInfo,
) -> BuildPlan:
    """
    Derive the ordered requirement plan.

    Args:
        config: Build configuration
        runtime_config: Parsed runtime config; an empty RuntimeConfig when none was found
        project: Parsed project file; an empty ProjectInfo when none was found

    Returns:
        BuildPlan: Requirements in plan order

    Raises:
        DetectionFailed: If there is neither a runtime version nor a project file
    """
    requirements: List[Requirement] = [
        Requirement("icu", RequirementMetadata(launch=True)),
    ]

    if config.live_reload_enabled:
        requirements.append(Requirement("watchexec", RequirementMetadata(launch=True)))

    if runtime_config.runtime_version:
        requirements.extend(_runtime_config_requirements(runtime_config))

    # a runtime config without a framework version (self-contained) does not count
    if not runtime_config.runtime_version and not project.project_file:
        raise DetectionFailed("no *.runtimeconfig.json or project file found")

    if project.project_file:
        requirements.extend(_project_requirements(project))

    logger.debug(f"Requirement plan: {[r.name for r in requirements]}")
    return BuildPlan(requires=tuple(requirements))
