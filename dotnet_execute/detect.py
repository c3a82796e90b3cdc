"""
Detect phase: decide whether the workspace holds a .NET app and what it needs.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from .analyzer import (
    RUNTIME_CONFIG_GLOB,
    BuildpackYMLParser,
    ProjectFileParser,
    ProjectInfo,
    RuntimeConfig,
    RuntimeConfigParser,
)
from .config import Configuration
from .errors import RuntimeConfigNotFound
from .planner.plan import BuildPlan
from .planner.requirements import build_requirement_plan

logger = logging.getLogger(__name__)


def resolve_project_root(
    workspace: str,
    config: Configuration,
    buildpack_yml_parser: BuildpackYMLParser,
) -> str:
    """Workspace joined with the project path from the environment or buildpack.yml."""
    project_path = config.project_path
    if project_path is None:
        project_path = buildpack_yml_parser.parse_project_path(os.path.join(workspace, "buildpack.yml"))

    if project_path:
        # absolute values still nest under the workspace
        return os.path.normpath(os.path.join(workspace, project_path.lstrip(os.sep)))
    return workspace


def detect(
    workspace: str,
    config: Configuration,
    buildpack_yml_parser: Optional[BuildpackYMLParser] = None,
    runtime_config_parser: Optional[RuntimeConfigParser] = None,
    project_parser: Optional[ProjectFileParser] = None,
) -> BuildPlan:
    """
    Run the detect phase against a workspace.

    Args:
        workspace: Application directory
        config: Build configuration
        buildpack_yml_parser: Reader for the legacy project path override
        runtime_config_parser: Reader for *.runtimeconfig.json
        project_parser: Reader for project files

    Returns:
        BuildPlan: Ordered requirements

    Raises:
        DetectionFailed: If the workspace holds neither a runtime config nor a project file
    """
    buildpack_yml_parser = buildpack_yml_parser or BuildpackYMLParser()
    runtime_config_parser = runtime_config_parser or RuntimeConfigParser()
    project_parser = project_parser or ProjectFileParser()

    root = resolve_project_root(workspace, config, buildpack_yml_parser)
    logger.debug(f"Detecting in {root}")

    try:
        runtime_config = runtime_config_parser.parse(os.path.join(root, RUNTIME_CONFIG_GLOB))
    except RuntimeConfigNotFound:
        runtime_config = RuntimeConfig()

    project = ProjectInfo()
    project_file = project_parser.find_project_file(root)
    if project_file:
        project = project_parser.parse(project_file)

    plan = build_requirement_plan(config, runtime_config, project)
    logger.info(f"Detected {runtime_config.app_name or os.path.basename(project_file)}: {', '.join(plan.names())}")
    return plan
