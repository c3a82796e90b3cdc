import json
import logging

from dotnet_execute.config import Configuration
from dotnet_execute.logs import resolve_level
from dotnet_execute.planner import BuildPlan, LaunchProcess, LayerPlan, Requirement, RequirementMetadata
from dotnet_execute.report import (
    format_configuration,
    format_layer,
    format_processes,
    format_requirements,
    write_json,
)


def test_format_processes_marks_default():
    text = format_processes(
        [
            LaunchProcess(type="reload-MyApp", command="watchexec", args=("--restart", "--", "/workspace/MyApp"), default=True, direct=True),
            LaunchProcess(type="MyApp", command="/workspace/MyApp", direct=True),
        ]
    )
    assert text.splitlines() == [
        "Assigning launch processes:",
        "  reload-MyApp (default): watchexec --restart -- /workspace/MyApp",
        "  MyApp: /workspace/MyApp",
    ]


def test_format_requirements():
    plan = BuildPlan(
        requires=(
            Requirement("icu", RequirementMetadata(launch=True)),
            Requirement("dotnet-sdk", RequirementMetadata(version="6.0.*", version_source="runtimeconfig.json")),
        )
    )
    assert format_requirements(plan).splitlines()[1:] == [
        "  icu [launch]",
        "  dotnet-sdk 6.0.* (from runtimeconfig.json)",
    ]


def test_format_layer_with_env():
    layer = LayerPlan(
        name="port-chooser",
        launch=True,
        exec_d=("/cnb/bin/port-chooser",),
        launch_env_defaults=(("ASPNETCORE_ENVIRONMENT", "Development"),),
    )
    text = format_layer(layer)
    assert "launch: true" in text
    assert 'ASPNETCORE_ENVIRONMENT -> "Development"' in text


def test_format_configuration():
    text = format_configuration(Configuration(live_reload_enabled=True))
    assert "  BP_LIVE_RELOAD_ENABLED: true" in text
    assert "BP_DOTNET_PROJECT_PATH" not in text


def test_write_json_creates_parents(tmp_path):
    dest = tmp_path / "a" / "b.json"
    write_json({"x": 1}, str(dest))
    assert json.loads(dest.read_text()) == {"x": 1}


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(logging.WARNING) == logging.WARNING
    assert resolve_level("nonsense") == logging.INFO
    assert resolve_level(None) == logging.INFO
