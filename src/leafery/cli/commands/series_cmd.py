# ABOUTME: The `leafery series` command for listing configured book series.
# ABOUTME: Displays a Rich table of axes, folder, and template for each series.

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from leafery.cli.options import load_config_or_exit
from leafery.series.model import (
    AxisRef,
    BookSeries,
    LiteralText,
    PropertyRef,
    TagsRef,
    Timestamp,
)


def _template_display(series: BookSeries) -> str:
    """Compact rendering of a template, e.g. J{page:3}.{title}."""
    parts: list[str] = []
    for fragment in series.template:
        if isinstance(fragment, LiteralText):
            parts.append(fragment.text)
        elif isinstance(fragment, AxisRef):
            spec = fragment.axis
            if fragment.letters:
                spec += ":A"
            elif fragment.pad:
                spec += f":{fragment.pad}"
            parts.append(f"{{{spec}}}")
        elif isinstance(fragment, PropertyRef):
            parts.append(f"{{{fragment.key}}}")
        elif isinstance(fragment, Timestamp):
            parts.append(f"{{@{fragment.fmt}}}")
        elif isinstance(fragment, TagsRef):
            parts.append("{#tags}")
    return "".join(parts)


@click.command("series")
@click.pass_context
def series(ctx: click.Context) -> None:
    """List all configured book series."""
    console = Console()
    config = load_config_or_exit(ctx, console)

    if not len(config.registry):
        console.print("[yellow]No series configured.[/yellow]")
        return

    table = Table()
    table.add_column("Series", style="bold")
    table.add_column("Axes")
    table.add_column("Folder", style="dim")
    table.add_column("Template", style="cyan")

    for entry in config.registry:
        axes = ", ".join(
            f"{spec.name} {spec.minimum}..{spec.maximum}" for spec in entry.specificities
        )
        table.add_row(
            entry.name, axes, entry.output_folder, escape(_template_display(entry))
        )

    console.print(table)
    console.print(f"\n[dim]{len(config.registry)} series[/dim]")
