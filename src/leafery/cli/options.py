# ABOUTME: Shared Click options and helpers for leafery CLI commands.
# ABOUTME: Parses page numbers and properties, and loads the config from the group context.

import click
from rich.console import Console
from rich.markup import escape

from leafery.config.loader import ConfigError, LeaferyConfig, load_config
from leafery.series.model import BookSeries
from leafery.series.page import PageConstructionError, PageIdentity
from leafery.series.registry import SeriesNotFoundError
from leafery.series.template import MissingPolicy

UNBOUND = "_"

def policy_option(default: MissingPolicy = MissingPolicy.GLOB):
    """--policy option choosing the missing-fragment policy."""
    return click.option(
        "--policy",
        type=click.Choice([p.value for p in MissingPolicy]),
        default=default.value,
        show_default=True,
        help="What to do with fragments that have no value.",
    )

limit_option = click.option(
    "--limit",
    default=None,
    help="Treat axes after this one as missing.",
)

property_option = click.option(
    "-p",
    "--prop",
    "props",
    multiple=True,
    metavar="KEY=VALUE",
    help="Page property, e.g. -p title=draft (repeatable).",
)

tag_option = click.option(
    "-t",
    "--tag",
    "tags",
    multiple=True,
    help="Tag for the page (repeatable).",
)


def parse_numbers(values: tuple[str, ...]) -> list[int | None]:
    """Parse page numbers; '_' leaves an axis unbound."""
    numbers: list[int | None] = []
    for value in values:
        if value == UNBOUND:
            numbers.append(None)
            continue
        try:
            numbers.append(int(value))
        except ValueError as exc:
            raise click.BadParameter(
                f"'{value}' is not a page number (use {UNBOUND} for unbound)",
                param_hint="NUMBERS",
            ) from exc
    return numbers


def parse_properties(values: tuple[str, ...]) -> dict[str, str]:
    """Parse KEY=VALUE pairs into a property table."""
    properties: dict[str, str] = {}
    for value in values:
        key, sep, prop = value.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"'{value}' is not KEY=VALUE", param_hint="--prop")
        properties[key] = prop
    return properties


def load_config_or_exit(ctx: click.Context, console: Console) -> LeaferyConfig:
    """Load the config named on the command group, exiting 1 on failure."""
    try:
        return load_config(ctx.obj.get("config_path"))
    except ConfigError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
        raise SystemExit(1) from exc


def build_page_or_exit(
    config: LeaferyConfig,
    series_name: str,
    numbers: tuple[str, ...],
    props: tuple[str, ...],
    console: Console,
) -> PageIdentity:
    """Look up a series and bind numbers and properties to it, exiting 1 on failure."""
    try:
        series: BookSeries = config.registry.lookup(series_name)
        return PageIdentity(
            series=series,
            numbers=tuple(parse_numbers(numbers)),
            properties=parse_properties(props),
        )
    except (SeriesNotFoundError, PageConstructionError) as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
        raise SystemExit(1) from exc
