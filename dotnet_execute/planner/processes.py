"""
Launch process plan for the build phase.
"""

from __future__ import annotations

import logging
import os
import stat
from typing import List, Tuple

from ..analyzer.runtime_config import RuntimeConfig
from ..analyzer.walk import iter_entries
from ..config import Configuration
from ..errors import MissingEntrypointError
from .plan import LaunchProcess, LayerPlan

logger = logging.getLogger(__name__)

DOTNET_HOST = "dotnet"
WATCHEXEC = "watchexec"
PORT_CHOOSER_LAYER = "port-chooser"
DEVELOPMENT_ENV = ("ASPNETCORE_ENVIRONMENT", "Development")

GROUP_READ_WRITE = stat.S_IRGRP | stat.S_IWGRP


def resolve_command(workspace: str, runtime_config: RuntimeConfig) -> Tuple[str, Tuple[str, ...]]:
    """
    Command and arguments that start the app.

    Executables (FDE and self-contained) are started directly. Anything else
    is a framework-dependent deployment launched through the dotnet host,
    which needs <AppName>.dll in the workspace.

    Raises:
        MissingEntrypointError: If the DLL is absent
        OSError: If the DLL cannot be inspected for any other reason
    """
    app_name = runtime_config.app_name
    if runtime_config.executable:
        return os.path.join(workspace, app_name), ()

    dll_name = f"{app_name}.dll"
    dll_path = os.path.join(workspace, dll_name)
    try:
        os.stat(dll_path)
    except FileNotFoundError as e:
        raise MissingEntrypointError(dll_name, dll_path) from e

    return DOTNET_HOST, (dll_path,)


def build_processes(workspace: str, runtime_config: RuntimeConfig, config: Configuration) -> List[LaunchProcess]:
    command, args = resolve_command(workspace, runtime_config)
    app_name = runtime_config.app_name

    if not config.live_reload_enabled:
        return [LaunchProcess(type=app_name, command=command, args=args, default=True, direct=True)]

    watch_args = (
        "--restart",
        "--watch", workspace,
        "--shell", "none",
        "--",
        command,
    ) + args
    return [
        LaunchProcess(
            type=f"reload-{app_name}",
            command=WATCHEXEC,
            args=watch_args,
            default=True,
            direct=True,
        ),
        LaunchProcess(type=app_name, command=command, args=args, direct=True),
    ]


def plan_port_chooser_layer(buildpack_dir: str, config: Configuration) -> LayerPlan:
    env_defaults: Tuple[Tuple[str, str], ...] = ()
    if config.debug_enabled:
        env_defaults = (DEVELOPMENT_ENV,)
    return LayerPlan(
        name=PORT_CHOOSER_LAYER,
        launch=True,
        exec_d=(os.path.join(buildpack_dir, "bin", PORT_CHOOSER_LAYER),),
        launch_env_defaults=env_defaults,
    )


def grant_group_read_write(workspace: str) -> int:
    """
    Add group read/write to every entry below workspace.

    watchexec runs as a different user than the one that owns the files,
    so it needs group access to see and react to changes. Re-applying the
    same bits is harmless. Errors propagate.

    Returns:
        int: Number of entries updated
    """
    count = 0
    for path in iter_entries(workspace):
        mode = os.stat(path).st_mode
        os.chmod(path, stat.S_IMODE(mode) | GROUP_READ_WRITE)
        count += 1
    logger.debug(f"Granted group read/write on {count} entries under {workspace}")
    return count
