from .plan import BuildPlan, BuildResult, LaunchProcess, LayerPlan, Requirement, RequirementMetadata
from .processes import build_processes, grant_group_read_write, plan_port_chooser_layer, resolve_command
from .requirements import build_requirement_plan
from .sdk_version import get_sdk_version

__all__ = [
    "BuildPlan",
    "BuildResult",
    "LaunchProcess",
    "LayerPlan",
    "Requirement",
    "RequirementMetadata",
    "build_processes",
    "build_requirement_plan",
    "get_sdk_version",
    "grant_group_read_write",
    "plan_port_chooser_layer",
    "resolve_command",
]
