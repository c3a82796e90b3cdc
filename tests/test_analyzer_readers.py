import json

import pytest

from dotnet_execute.analyzer import BuildpackYMLParser, ProjectFileParser, RuntimeConfigParser
from dotnet_execute.errors import (
    BuildpackYMLError,
    ProjectFileError,
    RuntimeConfigError,
    RuntimeConfigNotFound,
)


def write_runtime_config(directory, name, options):
    path = directory / f"{name}.runtimeconfig.json"
    path.write_text(json.dumps({"runtimeOptions": options}))
    return path


class TestRuntimeConfigParser:
    def test_framework_dependent_deployment(self, tmp_path):
        path = write_runtime_config(
            tmp_path, "MyApp", {"tfm": "net6.0", "framework": {"name": "Microsoft.NETCore.App", "version": "6.0.3"}}
        )
        config = RuntimeConfigParser().parse(str(tmp_path / "*.runtimeconfig.json"))
        assert config.path == str(path)
        assert config.app_name == "MyApp"
        assert config.runtime_version == "6.0.3"
        assert config.aspnet_version == ""
        assert config.executable is False

    def test_executable_next_to_config(self, tmp_path):
        write_runtime_config(tmp_path, "MyApp", {"framework": {"name": "Microsoft.NETCore.App", "version": "6.0.3"}})
        (tmp_path / "MyApp").write_text("binary")
        config = RuntimeConfigParser().parse(str(tmp_path / "*.runtimeconfig.json"))
        assert config.executable is True

    def test_frameworks_list_with_aspnet(self, tmp_path):
        write_runtime_config(
            tmp_path,
            "Web",
            {
                "frameworks": [
                    {"name": "Microsoft.NETCore.App", "version": "6.0.3"},
                    {"name": "Microsoft.AspNetCore.App", "version": "6.0.4"},
                ]
            },
        )
        config = RuntimeConfigParser().parse(str(tmp_path / "*.runtimeconfig.json"))
        assert config.runtime_version == "6.0.3"
        assert config.aspnet_version == "6.0.4"

    def test_aspnet_only_implies_runtime(self, tmp_path):
        write_runtime_config(tmp_path, "Web", {"framework": {"name": "Microsoft.AspNetCore.App", "version": "7.0.1"}})
        config = RuntimeConfigParser().parse(str(tmp_path / "*.runtimeconfig.json"))
        assert config.runtime_version == "7.0.1"
        assert config.aspnet_version == "7.0.1"

    def test_self_contained_has_no_versions(self, tmp_path):
        write_runtime_config(
            tmp_path,
            "MyApp",
            {"includedFrameworks": [{"name": "Microsoft.NETCore.App", "version": "6.0.3"}]},
        )
        config = RuntimeConfigParser().parse(str(tmp_path / "*.runtimeconfig.json"))
        assert config.runtime_version == ""
        assert config.app_name == "MyApp"

    def test_comments_are_allowed(self, tmp_path):
        (tmp_path / "MyApp.runtimeconfig.json").write_text(
            '{\n  // generated\n  "runtimeOptions": {\n    /* fdd */\n'
            '    "framework": {"name": "Microsoft.NETCore.App", "version": "6.0.3"}\n  }\n}\n'
        )
        config = RuntimeConfigParser().parse(str(tmp_path / "*.runtimeconfig.json"))
        assert config.runtime_version == "6.0.3"

    def test_missing_file_is_not_found(self, tmp_path):
        with pytest.raises(RuntimeConfigNotFound):
            RuntimeConfigParser().parse(str(tmp_path / "*.runtimeconfig.json"))

    def test_not_found_is_a_file_not_found_error(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RuntimeConfigParser().parse(str(tmp_path / "*.runtimeconfig.json"))

    def test_multiple_files(self, tmp_path):
        write_runtime_config(tmp_path, "A", {})
        write_runtime_config(tmp_path, "B", {})
        with pytest.raises(RuntimeConfigError, match="multiple"):
            RuntimeConfigParser().parse(str(tmp_path / "*.runtimeconfig.json"))

    def test_malformed_json(self, tmp_path):
        (tmp_path / "MyApp.runtimeconfig.json").write_text("{not json")
        with pytest.raises(RuntimeConfigError, match="MyApp.runtimeconfig.json"):
            RuntimeConfigParser().parse(str(tmp_path / "*.runtimeconfig.json"))


WEB_PROJECT = """<Project Sdk="Microsoft.NET.Sdk.Web">
  <PropertyGroup>
    <TargetFramework>net6.0</TargetFramework>
  </PropertyGroup>
  <Target Name="NpmInstall" BeforeTargets="Build">
    <Exec Command="npm install" />
  </Target>
</Project>
"""

CONSOLE_PROJECT = """<Project Sdk="Microsoft.NET.Sdk">
  <PropertyGroup>
    <OutputType>Exe</OutputType>
    <TargetFrameworks>netstandard2.0;netcoreapp3.1</TargetFrameworks>
  </PropertyGroup>
</Project>
"""


class TestProjectFileParser:
    def test_find_project_file(self, tmp_path):
        (tmp_path / "b.fsproj").write_text(CONSOLE_PROJECT)
        (tmp_path / "a.csproj").write_text(CONSOLE_PROJECT)
        assert ProjectFileParser().find_project_file(str(tmp_path)) == str(tmp_path / "a.csproj")

    def test_find_project_file_absent(self, tmp_path):
        assert ProjectFileParser().find_project_file(str(tmp_path)) == ""
        assert ProjectFileParser().find_project_file(str(tmp_path / "missing")) == ""

    def test_web_project(self, tmp_path):
        path = tmp_path / "web.csproj"
        path.write_text(WEB_PROJECT)
        info = ProjectFileParser().parse(str(path))
        assert info.version == "6.0.0"
        assert info.requires_aspnet is True
        assert info.requires_node is True

    def test_console_project(self, tmp_path):
        path = tmp_path / "console.csproj"
        path.write_text(CONSOLE_PROJECT)
        info = ProjectFileParser().parse(str(path))
        assert info.version == "3.1.0"
        assert info.requires_aspnet is False
        assert info.requires_node is False

    def test_framework_reference(self, tmp_path):
        path = tmp_path / "lib.csproj"
        path.write_text(
            '<Project Sdk="Microsoft.NET.Sdk"><PropertyGroup><TargetFramework>net7.0</TargetFramework>'
            '</PropertyGroup><ItemGroup><FrameworkReference Include="Microsoft.AspNetCore.App" />'
            "</ItemGroup></Project>"
        )
        assert ProjectFileParser().aspnet_is_required(str(path)) is True

    def test_missing_target_framework(self, tmp_path):
        path = tmp_path / "x.csproj"
        path.write_text('<Project Sdk="Microsoft.NET.Sdk"><PropertyGroup /></Project>')
        with pytest.raises(ProjectFileError, match="TargetFramework"):
            ProjectFileParser().parse_version(str(path))

    def test_malformed_xml(self, tmp_path):
        path = tmp_path / "x.csproj"
        path.write_text("<Project>")
        with pytest.raises(ProjectFileError, match="x.csproj"):
            ProjectFileParser().parse_version(str(path))


class TestBuildpackYMLParser:
    def test_missing_file(self, tmp_path):
        assert BuildpackYMLParser().parse_project_path(str(tmp_path / "buildpack.yml")) == ""

    def test_project_path(self, tmp_path, caplog):
        path = tmp_path / "buildpack.yml"
        path.write_text("dotnet-build:\n  project-path: src/web\n")
        assert BuildpackYMLParser().parse_project_path(str(path)) == "src/web"
        assert "deprecated" in caplog.text

    def test_other_sections_only(self, tmp_path):
        path = tmp_path / "buildpack.yml"
        path.write_text("dotnet-framework:\n  version: 6.0.0\n")
        assert BuildpackYMLParser().parse_project_path(str(path)) == ""

    def test_malformed(self, tmp_path):
        path = tmp_path / "buildpack.yml"
        path.write_text("dotnet-build: [unclosed\n")
        with pytest.raises(BuildpackYMLError):
            BuildpackYMLParser().parse_project_path(str(path))
