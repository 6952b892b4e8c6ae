# ABOUTME: The `leafery argfile` command for queueing a page's metadata for exiftool.
# ABOUTME: Resolves the archive path and appends one record to an exiftool argfile.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from leafery.cli.options import (
    build_page_or_exit,
    load_config_or_exit,
    policy_option,
    property_option,
    tag_option,
)
from leafery.core.pipeline import prepare_page
from leafery.formats.exiftool import ArgfileError, append_argfile
from leafery.metadata.types import OverwritePolicy
from leafery.series.template import MissingComponentError, MissingPolicy
from leafery.tags.manifest import ConfigurationMissingError

_OVERWRITE_CHOICES = {
    "none": OverwritePolicy.NONE,
    "original": OverwritePolicy.ORIGINAL,
    "in-place": OverwritePolicy.ORIGINAL_IN_PLACE,
}


@click.command("argfile")
@click.argument("series_name", metavar="SERIES")
@click.argument("numbers", nargs=-1)
@click.option(
    "-s",
    "--source",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="The scanned file being archived.",
)
@click.option(
    "-o",
    "--output",
    "argfile_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path("leafery.args"),
    show_default=True,
    help="Argfile to append to.",
)
@property_option
@tag_option
@click.option("--comment", default=None, help="Comment to store in the file.")
@click.option(
    "--overwrite",
    type=click.Choice(list(_OVERWRITE_CHOICES)),
    default="none",
    show_default=True,
    help="How exiftool should treat the original file.",
)
@policy_option(MissingPolicy.FAIL)
@click.pass_context
def argfile(
    ctx: click.Context,
    series_name: str,
    numbers: tuple[str, ...],
    source: Path,
    argfile_path: Path,
    props: tuple[str, ...],
    tags: tuple[str, ...],
    comment: str | None,
    overwrite: str,
    policy: str,
) -> None:
    """Append an exiftool record for a page of SERIES numbered by NUMBERS."""
    console = Console()
    config = load_config_or_exit(ctx, console)
    page = build_page_or_exit(config, series_name, numbers, props, console)

    try:
        prepared = prepare_page(
            page,
            source,
            config.root,
            config.taxonomy,
            config.genres,
            tags,
            comment=comment,
            overwrite=_OVERWRITE_CHOICES[overwrite],
            policy=policy,
            tz=config.timezone,
        )
    except (MissingComponentError, ConfigurationMissingError) as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
        raise SystemExit(1) from exc

    if prepared is None:
        console.print("[yellow]Skipped:[/yellow] page has no complete name.")
        return

    try:
        append_argfile(argfile_path, prepared.pending)
    except ArgfileError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
        raise SystemExit(1) from exc

    console.print(f"[green]Queued:[/green] {escape(str(prepared.destination))}", soft_wrap=True)
    social = " ".join(prepared.manifestation.social_tags)
    if social:
        console.print(f"  [dim]Social:[/dim] {escape(social)}", soft_wrap=True)
