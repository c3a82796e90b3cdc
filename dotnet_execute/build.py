"""
Build phase: generate the SBOM, assign launch processes and set up the
port-chooser launch hook.
"""

from __future__ import annotations

import logging
import os
import time
from typing import Callable, Optional

from .analyzer import RUNTIME_CONFIG_GLOB, RuntimeConfigParser
from .config import Configuration
from .errors import RuntimeConfigNotFound
from .planner.plan import BuildResult
from .planner.processes import build_processes, grant_group_read_write, plan_port_chooser_layer
from .report import format_configuration, format_layer, format_processes
from .sbom import DepsJSONGenerator, SBOMGenerator

logger = logging.getLogger(__name__)


def build(
    workspace: str,
    buildpack_dir: str,
    config: Configuration,
    runtime_config_parser: Optional[RuntimeConfigParser] = None,
    sbom_generator: Optional[SBOMGenerator] = None,
    clock: Callable[[], float] = time.monotonic,
) -> BuildResult:
    """
    Run the build phase against a workspace.

    Args:
        workspace: Application directory
        buildpack_dir: Buildpack installation directory holding bin/port-chooser
        config: Build configuration
        runtime_config_parser: Reader for *.runtimeconfig.json
        sbom_generator: SBOM collaborator
        clock: Time source used to measure SBOM generation

    Returns:
        BuildResult: Processes, layers and SBOM

    Raises:
        RuntimeConfigNotFound: If the workspace has no *.runtimeconfig.json
        MissingEntrypointError: If a framework-dependent app has no DLL
        OSError: If the live-reload permission walk fails
    """
    runtime_config_parser = runtime_config_parser or RuntimeConfigParser()
    sbom_generator = sbom_generator or DepsJSONGenerator()

    logger.debug(format_configuration(config))

    try:
        runtime_config = runtime_config_parser.parse(os.path.join(workspace, RUNTIME_CONFIG_GLOB))
    except RuntimeConfigNotFound as e:
        raise RuntimeConfigNotFound(f"failed to find *.runtimeconfig.json: {e}") from e

    logger.info(f"Generating SBOM for {workspace}")
    started = clock()
    sbom = sbom_generator.generate(workspace)
    logger.info(f"Completed in {round((clock() - started) * 1000)}ms")

    processes = build_processes(workspace, runtime_config, config)
    if config.live_reload_enabled:
        grant_group_read_write(workspace)
    logger.info(format_processes(processes))

    layer = plan_port_chooser_layer(buildpack_dir, config)
    logger.info(format_layer(layer))

    return BuildResult(processes=tuple(processes), layers=(layer,), sbom=sbom)
