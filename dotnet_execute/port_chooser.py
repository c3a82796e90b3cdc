"""
Launch-time hook that binds ASP.NET Core to the container port.

The hook runs as an exec.d program: it prints TOML environment assignments
that the launcher applies before starting the app.
"""

from __future__ import annotations

import json
from typing import Dict, Mapping

DEFAULT_PORT = "8080"


def choose_port(environ: Mapping[str, str]) -> Dict[str, str]:
    # an explicit ASPNETCORE_URLS wins
    if environ.get("ASPNETCORE_URLS"):
        return {}
    port = environ.get("PORT") or DEFAULT_PORT
    return {"ASPNETCORE_URLS": f"http://0.0.0.0:{port}"}


def render_toml(values: Mapping[str, str]) -> str:
    # JSON string escaping is valid TOML basic-string escaping
    return "".join(f"{key} = {json.dumps(value)}\n" for key, value in values.items())
