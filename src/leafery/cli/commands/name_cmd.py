# ABOUTME: The `leafery name` command for resolving a page's file name or archive path.
# ABOUTME: Prints the bare result so it can be used in shell pipelines and globs.

import click
from rich.console import Console
from rich.markup import escape

from leafery.cli.options import (
    build_page_or_exit,
    limit_option,
    load_config_or_exit,
    policy_option,
    property_option,
    tag_option,
)
from leafery.core.composer import compose_name, compose_path, series_glob
from leafery.series.template import MissingComponentError, MissingPolicy
from leafery.tags.manifest import ConfigurationMissingError


@click.command("name")
@click.argument("series_name", metavar="SERIES")
@click.argument("numbers", nargs=-1)
@property_option
@tag_option
@policy_option()
@limit_option
@click.option(
    "--ext",
    "extension",
    default=None,
    help="Print the full archive path with this extension (e.g. .jpg).",
)
@click.option(
    "--glob",
    "as_glob",
    is_flag=True,
    default=False,
    help=(
        "Print a glob pattern for the archived files of this page. "
        "Always uses the glob policy."
    ),
)
@click.pass_context
def name(
    ctx: click.Context,
    series_name: str,
    numbers: tuple[str, ...],
    props: tuple[str, ...],
    tags: tuple[str, ...],
    policy: str,
    limit: str | None,
    extension: str | None,
    as_glob: bool,
) -> None:
    """Resolve the name of a page of SERIES numbered by NUMBERS.

    Use _ for an axis without a value.
    """
    if as_glob and policy != MissingPolicy.GLOB.value:
        raise click.UsageError(f"--glob cannot be combined with --policy {policy}")

    console = Console(stderr=True)
    config = load_config_or_exit(ctx, console)
    page = build_page_or_exit(config, series_name, numbers, props, console)

    try:
        if as_glob:
            result = series_glob(
                page, config.root, extension or "", limit=limit, tz=config.timezone
            )
        elif extension is not None:
            path = compose_path(
                page,
                config.root,
                extension,
                tags,
                config.taxonomy,
                config.genres,
                policy=policy,
                limit=limit,
                tz=config.timezone,
            )
            result = str(path) if path is not None else None
        else:
            result = compose_name(
                page,
                tags,
                config.taxonomy,
                config.genres,
                policy=policy,
                limit=limit,
                tz=config.timezone,
            )
    except (MissingComponentError, ConfigurationMissingError, ValueError) as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
        raise SystemExit(1) from exc

    if result is None:
        console.print("[yellow]Page has no complete name.[/yellow]")
        raise SystemExit(1)

    click.echo(result)
