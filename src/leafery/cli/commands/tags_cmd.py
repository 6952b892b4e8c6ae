# ABOUTME: The `leafery tags` command for inspecting how a tag set manifests.
# ABOUTME: Shows the genre, metadata keywords, social tags, and filename fragment.

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from leafery.cli.options import load_config_or_exit
from leafery.tags.manifest import ConfigurationMissingError, manifest


@click.command("tags")
@click.argument("tag_names", metavar="TAGS", nargs=-1)
@click.pass_context
def tags(ctx: click.Context, tag_names: tuple[str, ...]) -> None:
    """Show the genre and outputs derived from TAGS."""
    console = Console()
    config = load_config_or_exit(ctx, console)

    unknown = [tag for tag in tag_names if tag not in config.taxonomy]
    for tag in unknown:
        console.print(f"[yellow]Unknown tag:[/yellow] {escape(tag)}")

    try:
        result = manifest(tag_names, config.taxonomy, config.genres)
    except ConfigurationMissingError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
        raise SystemExit(1) from exc

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=14)
    table.add_column("Value")

    table.add_row("Genre", escape(str(result.genre)))
    table.add_row("Keywords", escape(", ".join(result.metadata_keywords)))
    table.add_row("Social", escape(" ".join(result.social_tags)))
    table.add_row("Fragment", escape(result.filename_fragment))

    console.print(table)
