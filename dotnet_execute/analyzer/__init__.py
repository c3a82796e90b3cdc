from .buildpack_yml import BuildpackYMLParser
from .project_file import ProjectFileParser, ProjectInfo
from .runtime_config import RUNTIME_CONFIG_GLOB, RuntimeConfig, RuntimeConfigParser

__all__ = [
    "BuildpackYMLParser",
    "ProjectFileParser",
    "ProjectInfo",
    "RUNTIME_CONFIG_GLOB",
    "RuntimeConfig",
    "RuntimeConfigParser",
]
