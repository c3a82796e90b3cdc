"""
Error types raised by the detect and build phases.
"""


class DotnetExecuteError(Exception):
    """Base class for every error this package raises on purpose."""


class ConfigurationError(DotnetExecuteError, ValueError):
    """Raised when an environment toggle cannot be parsed."""

    def __init__(self, variable: str, value: str):
        self.variable = variable
        self.value = value
        super().__init__(f"failed to parse {variable}: invalid boolean value {value!r}")


class DetectionFailed(DotnetExecuteError):
    """
    The workspace does not contain anything this buildpack can launch.

    This is a negative detection result, not a fault: the orchestrator
    skips the buildpack and moves on.
    """


class MissingEntrypointError(DotnetExecuteError, FileNotFoundError):
    """Raised when a framework-dependent app has no <AppName>.dll."""

    def __init__(self, dll_name: str, path: str):
        self.dll_name = dll_name
        self.path = path
        super().__init__(f"no entrypoint [{dll_name}] found: {path}")


class RuntimeConfigNotFound(DotnetExecuteError, FileNotFoundError):
    """No file matched the *.runtimeconfig.json glob."""


class RuntimeConfigError(DotnetExecuteError):
    """A *.runtimeconfig.json file exists but cannot be used."""


class ProjectFileError(DotnetExecuteError):
    """A project file exists but cannot be parsed."""


class BuildpackYMLError(DotnetExecuteError):
    """buildpack.yml exists but cannot be parsed."""


class SBOMError(DotnetExecuteError):
    """The SBOM could not be generated."""
