# ABOUTME: CLI package for leafery, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

from pathlib import Path

import click

from leafery.cli.commands import argfile_cmd, name_cmd, series_cmd, tags_cmd
from leafery.config.loader import CONFIG_ENV_VAR
from leafery.logging_setup import setup_logging


@click.group()
@click.version_option(package_name="leafery")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=CONFIG_ENV_VAR,
    default=None,
    help="Path to config.yaml (default: ~/.leafery/config.yaml).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write a debug log to this file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool, log_file: Path | None) -> None:
    """leafery - names and tags scanned pages of numbered series."""
    setup_logging("DEBUG" if verbose else "WARNING", log_file)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


cli.add_command(series_cmd.series)
cli.add_command(name_cmd.name)
cli.add_command(tags_cmd.tags)
cli.add_command(argfile_cmd.argfile)
