"""voidrt developer CLI: inspect, emit and compile the runtime library."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from voidrt import __version__
from voidrt.builder import build_unit, write_unit
from voidrt.c_runtime import RuntimeLibrary
from voidrt.config import ConfigError, RuntimeConfig, find_config, load_config


def _load(config_path: str | None) -> RuntimeConfig:
    """Explicit --config, else voidrt.toml above cwd, else defaults."""
    try:
        if config_path:
            return load_config(Path(config_path))
        try:
            return load_config(find_config())
        except FileNotFoundError:
            return RuntimeConfig()
    except ConfigError as e:
        click.echo(f"error: {e}", err=True)
        raise SystemExit(1)


def _library(ctx: click.Context) -> RuntimeLibrary:
    lib = RuntimeLibrary(_load(ctx.obj["config"]))
    lib.initialize()
    return lib


@click.group()
@click.version_option(__version__, prog_name="voidrt")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False),
              help="Path to voidrt.toml.")
@click.option("--verbose", is_flag=True, help="Log registry and build activity.")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """The VoidScript C runtime library."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config_path


@main.command()
@click.option("--builtins-only", is_flag=True, help="Only functions with an emitted body.")
@click.pass_context
def functions(ctx: click.Context, builtins_only: bool) -> None:
    """List registered runtime functions."""
    lib = _library(ctx)
    for func in lib.ordered_functions():
        if builtins_only and not (func.is_builtin and func.implementation):
            continue
        click.echo(func.name)


@main.command()
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None,
              help="Write to a file instead of stdout.")
@click.pass_context
def emit(ctx: click.Context, output: str | None) -> None:
    """Emit the runtime library as a C unit with an empty main."""
    unit = _library(ctx).assemble_unit()
    if output:
        write_unit(unit, Path(output))
        click.echo(f"wrote {output}")
    else:
        click.echo("\n".join(unit))


@main.command()
@click.option("-o", "--output", default="voidrt_runtime", help="Binary name.")
@click.option("--build-dir", type=click.Path(file_okay=False), default="build",
              help="Directory for the generated source and binary.")
@click.pass_context
def build(ctx: click.Context, output: str, build_dir: str) -> None:
    """Compile the runtime library to check it builds."""
    lib = _library(ctx)
    result = build_unit(lib.assemble_unit(), Path(build_dir), output, lib.config)
    if not result.ok:
        click.echo(f"error: {result.c_error}", err=True)
        raise SystemExit(1)
    click.echo(f"built {result.binary}")
