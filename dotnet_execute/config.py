"""
Build configuration read from the environment.

The configuration is read once at process entry and handed to the phases
as an immutable value.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from .errors import ConfigurationError

LIVE_RELOAD_ENV = "BP_LIVE_RELOAD_ENABLED"
DEBUG_ENV = "BP_DEBUG_ENABLED"
PROJECT_PATH_ENV = "BP_DOTNET_PROJECT_PATH"
LOG_LEVEL_ENV = "BP_LOG_LEVEL"

_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False"}


def parse_bool(variable: str, value: str) -> bool:
    """
    Parse a boolean toggle strictly.

    Args:
        variable: Name of the environment variable, used in the error
        value: Raw value

    Returns:
        bool: Parsed value

    Raises:
        ConfigurationError: If the value is not a recognised boolean
    """
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(variable, value)


@dataclass(frozen=True)
class Configuration:
    live_reload_enabled: bool = False
    debug_enabled: bool = False
    # None means unset: fall back to buildpack.yml
    project_path: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Configuration":
        env = os.environ if environ is None else environ

        live_reload = False
        if LIVE_RELOAD_ENV in env:
            live_reload = parse_bool(LIVE_RELOAD_ENV, env[LIVE_RELOAD_ENV])

        debug = False
        if DEBUG_ENV in env:
            debug = parse_bool(DEBUG_ENV, env[DEBUG_ENV])

        return cls(
            live_reload_enabled=live_reload,
            debug_enabled=debug,
            project_path=env.get(PROJECT_PATH_ENV),
            log_level=env.get(LOG_LEVEL_ENV) or ("DEBUG" if debug else "INFO"),
        )

    def as_env(self) -> Dict[str, str]:
        """Render the configuration back to the variables it was read from."""
        values = {
            LIVE_RELOAD_ENV: str(self.live_reload_enabled).lower(),
            DEBUG_ENV: str(self.debug_enabled).lower(),
        }
        if self.project_path is not None:
            values[PROJECT_PATH_ENV] = self.project_path
        return values
