from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class RequirementMetadata:
    version: Optional[str] = None
    version_source: Optional[str] = None
    launch: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.version is not None:
            data["version"] = self.version
        if self.version_source is not None:
            data["version-source"] = self.version_source
        if self.launch is not None:
            data["launch"] = self.launch
        return data


@dataclass(frozen=True)
class Requirement:
    name: str
    metadata: RequirementMetadata = field(default_factory=RequirementMetadata)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "metadata": self.metadata.to_dict()}


@dataclass(frozen=True)
class BuildPlan:
    requires: Tuple[Requirement, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"requires": [r.to_dict() for r in self.requires]}

    def names(self) -> List[str]:
        return [r.name for r in self.requires]


@dataclass(frozen=True)
class LaunchProcess:
    type: str
    command: str
    args: Tuple[str, ...] = ()
    default: bool = False
    direct: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "command": self.command,
            "args": list(self.args),
            "default": self.default,
            "direct": self.direct,
        }


@dataclass(frozen=True)
class LayerPlan:
    name: str
    launch: bool = False
    exec_d: Tuple[str, ...] = ()
    launch_env_defaults: Tuple[Tuple[str, str], ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "launch": self.launch,
            "exec_d": list(self.exec_d),
            "launch_env": {f"{k}.default": v for k, v in self.launch_env_defaults},
        }


@dataclass(frozen=True)
class BuildResult:
    processes: Tuple[LaunchProcess, ...]
    layers: Tuple[LayerPlan, ...] = ()
    sbom: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "launch": {"processes": [p.to_dict() for p in self.processes]},
            "layers": [layer.to_dict() for layer in self.layers],
        }
