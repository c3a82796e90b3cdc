from __future__ import annotations

import json
import shlex
from pathlib import Path
from typing import Any, Dict, Iterable

from .config import Configuration
from .planner.plan import BuildPlan, LaunchProcess, LayerPlan


def format_configuration(config: Configuration) -> str:
    lines = ["Build configuration:"]
    for key, value in sorted(config.as_env().items()):
        lines.append(f"  {key}: {value}")
    return "\n".join(lines)


def format_requirements(plan: BuildPlan) -> str:
    lines = ["Requirements:"]
    for req in plan.requires:
        meta = req.metadata
        parts = [req.name]
        if meta.version is not None:
            parts.append(meta.version)
        if meta.version_source is not None:
            parts.append(f"(from {meta.version_source})")
        if meta.launch:
            parts.append("[launch]")
        lines.append("  " + " ".join(parts))
    return "\n".join(lines)


def format_processes(processes: Iterable[LaunchProcess]) -> str:
    lines = ["Assigning launch processes:"]
    for process in processes:
        label = process.type + (" (default)" if process.default else "")
        command = " ".join(shlex.quote(part) for part in (process.command, *process.args))
        lines.append(f"  {label}: {command}")
    return "\n".join(lines)


def format_layer(layer: LayerPlan) -> str:
    lines = [f"Layer {layer.name}:", f"  launch: {str(layer.launch).lower()}"]
    for hook in layer.exec_d:
        lines.append(f"  exec.d: {hook}")
    if layer.launch_env_defaults:
        lines.append("  Configuring launch environment:")
        for key, value in layer.launch_env_defaults:
            lines.append(f'    {key} -> "{value}"')
    return "\n".join(lines)


def write_json(data: Dict[str, Any], dest_path: str) -> None:
    dest = Path(dest_path)
    dest.parent.mkdir(parents=True, exist_ok=True)
    with open(dest, "w") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
