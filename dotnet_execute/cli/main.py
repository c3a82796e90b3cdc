"""Main CLI entrypoint for dotnet-execute."""

import json
import os
import sys
from pathlib import Path

import click

from ..build import build
from ..config import Configuration
from ..detect import detect
from ..errors import ConfigurationError, DetectionFailed, DotnetExecuteError
from ..logs import configure_logging
from ..port_chooser import choose_port, render_toml
from ..report import format_requirements, write_json

# exit code the lifecycle reads as "skip this buildpack"
DETECT_FAIL_CODE = 100


def _load_config(log_level) -> Configuration:
    try:
        config = Configuration.from_env()
    except ConfigurationError as e:
        configure_logging(log_level)
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)
    configure_logging(log_level or config.log_level)
    return config


@click.group()
@click.option('--log-level', default=None, help='Logging level (defaults to BP_LOG_LEVEL or INFO)')
@click.pass_context
def main(ctx, log_level):
    """dotnet-execute - plan requirements and launch processes for .NET apps."""
    ctx.ensure_object(dict)
    ctx.obj['log_level'] = log_level


@main.command(name='detect')
@click.option('--workspace', default='.', type=click.Path(file_okay=False), help='Application directory')
@click.option('--plan', 'plan_path', type=click.Path(dir_okay=False), help='Write the requirement plan JSON here')
@click.pass_context
def detect_cmd(ctx, workspace, plan_path):
    """Detect a .NET app and print its requirement plan."""
    config = _load_config(ctx.obj.get('log_level'))
    try:
        plan = detect(os.path.abspath(workspace), config)
    except DetectionFailed as e:
        click.echo(f"SKIP: {e}")
        sys.exit(DETECT_FAIL_CODE)
    except (DotnetExecuteError, OSError) as e:
        click.echo(f"❌ Detection failed: {e}", err=True)
        sys.exit(1)

    if plan_path:
        write_json(plan.to_dict(), plan_path)
    else:
        click.echo(json.dumps(plan.to_dict(), indent=2))
    click.echo(format_requirements(plan), err=True)


@main.command(name='build')
@click.option('--workspace', default='.', type=click.Path(file_okay=False), help='Application directory')
@click.option('--buildpack-dir', required=True, type=click.Path(file_okay=False), help='Buildpack directory')
@click.option('--output', 'output_dir', required=True, type=click.Path(file_okay=False), help='Directory for build results')
@click.pass_context
def build_cmd(ctx, workspace, buildpack_dir, output_dir):
    """Assign launch processes and write the build results."""
    config = _load_config(ctx.obj.get('log_level'))
    try:
        result = build(os.path.abspath(workspace), os.path.abspath(buildpack_dir), config)
    except (DotnetExecuteError, OSError) as e:
        click.echo(f"❌ Build failed: {e}", err=True)
        sys.exit(1)

    out = Path(output_dir)
    write_json(result.to_dict(), str(out / "build.json"))
    if result.sbom is not None:
        write_json(result.sbom, str(out / "sbom.json"))
    click.echo(f"✅ Wrote build results to {out}")


@main.command(name='port-chooser')
@click.option('--output', 'output', type=click.File('w'), default='-', help='Where to write the TOML (default stdout)')
def port_chooser_cmd(output):
    """Emit ASPNETCORE_URLS for the container port."""
    output.write(render_toml(choose_port(os.environ)))


if __name__ == '__main__':
    main()
