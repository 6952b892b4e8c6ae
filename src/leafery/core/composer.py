# ABOUTME: Composes final file names and archive paths for series pages.
# ABOUTME: Merges template output with the tag manifestation's filename fragment.

import glob
from collections.abc import Iterable
from datetime import datetime, tzinfo
from pathlib import Path

from leafery.series.page import PageIdentity
from leafery.series.template import UTC, MissingPolicy, resolve_template
from leafery.tags.manifest import GenreTable, ManifestationResult, manifest
from leafery.tags.taxonomy import TagTaxonomy


def compose_name(
    page: PageIdentity,
    tags: Iterable[str] = (),
    taxonomy: TagTaxonomy | None = None,
    genres: GenreTable | None = None,
    *,
    policy: MissingPolicy | str = MissingPolicy.GLOB,
    limit: str | None = None,
    tz: tzinfo = UTC,
    now: datetime | None = None,
    manifestation: ManifestationResult | None = None,
) -> str | None:
    """Resolve the file name (without extension) for a page.

    Manifestation is only computed when the series template has a tag slot;
    otherwise the name is exactly the template resolution and the tag
    arguments are ignored. A precomputed manifestation is used as is.

    Raises:
        ValueError: If the template needs tags but no taxonomy or genre table is given.
    """
    tag_fragment: str | None = None
    if page.series.uses_tags:
        if manifestation is not None:
            tag_fragment = manifestation.filename_fragment
        elif taxonomy is None or genres is None:
            raise ValueError(
                f"series {page.series.name!r} names files by tag and needs a taxonomy"
            )
        else:
            tag_fragment = manifest(tags, taxonomy, genres).filename_fragment

    return resolve_template(
        page, policy, limit, tz=tz, now=now, tag_fragment=tag_fragment
    )


def _normalize_extension(extension: str) -> str:
    """Ensure a non-empty extension starts with a dot."""
    if not extension or extension.startswith("."):
        return extension
    return f".{extension}"


def series_directory(page: PageIdentity, root: Path) -> Path:
    """Directory holding the page's series below the archive root."""
    return root / page.series.output_folder


def compose_path(
    page: PageIdentity,
    root: Path,
    extension: str,
    tags: Iterable[str] = (),
    taxonomy: TagTaxonomy | None = None,
    genres: GenreTable | None = None,
    *,
    policy: MissingPolicy | str = MissingPolicy.GLOB,
    limit: str | None = None,
    tz: tzinfo = UTC,
    now: datetime | None = None,
    manifestation: ManifestationResult | None = None,
) -> Path | None:
    """Full archive path: root / series folder / name + original extension.

    Returns None when the name resolution aborts under the absent policy.
    """
    name = compose_name(
        page,
        tags,
        taxonomy,
        genres,
        policy=policy,
        limit=limit,
        tz=tz,
        now=now,
        manifestation=manifestation,
    )
    if name is None:
        return None
    return series_directory(page, root) / f"{name}{_normalize_extension(extension)}"


def series_glob(
    page: PageIdentity,
    root: Path,
    extension: str = "",
    *,
    limit: str | None = None,
    tz: tzinfo = UTC,
    now: datetime | None = None,
) -> str:
    """Glob pattern matching archived files for a partially specified page.

    Unbound axes, axes after limit, missing properties, and the tag slot all
    become wildcards. Glob metacharacters in the directory part are escaped,
    so the pattern can be fed to glob.glob.
    """
    base = f"{glob.escape(series_directory(page, root).as_posix())}/"
    name = resolve_template(
        page, MissingPolicy.GLOB, limit, tz=tz, now=now, base=base
    )
    # Glob policy never aborts, so name is always a string here.
    assert name is not None
    suffix = _normalize_extension(extension)
    return f"{name}{suffix or '.*'}"
