# ABOUTME: Prepares a series page for archiving: destination path plus pending metadata.
# ABOUTME: Runs tag manifestation once and feeds it to both the file name and the keywords.

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, tzinfo
from pathlib import Path

from leafery.core.composer import compose_path
from leafery.metadata.types import OverwritePolicy, PendingMetadata
from leafery.series.page import PageIdentity
from leafery.series.template import UTC, MissingPolicy
from leafery.tags.manifest import GenreTable, ManifestationResult, manifest
from leafery.tags.taxonomy import TagTaxonomy

logger = logging.getLogger(__name__)

TITLE_PROPERTY = "title"


@dataclass
class PreparedPage:
    """Everything needed to file one page and tag it.

    destination is where the page belongs in the archive; pending.path is
    the file the tagging tool should edit (the destination, since tagging
    runs after the move).
    """

    source: Path
    destination: Path
    pending: PendingMetadata
    manifestation: ManifestationResult


def prepare_page(
    page: PageIdentity,
    source: Path,
    root: Path,
    taxonomy: TagTaxonomy,
    genres: GenreTable,
    tags: Iterable[str] = (),
    *,
    comment: str | None = None,
    overwrite: OverwritePolicy = OverwritePolicy.NONE,
    policy: MissingPolicy | str = MissingPolicy.FAIL,
    tz: tzinfo = UTC,
    now: datetime | None = None,
) -> PreparedPage | None:
    """Work out the archive path and metadata for a page.

    The page's title property becomes the metadata title. The source file's
    extension is kept. Resolution defaults to the fail policy since a page
    being filed needs a complete name.

    Args:
        page: Identity of the page.
        source: The scanned file as it is now.
        root: Archive root directory.
        taxonomy: Tag lookup table.
        genres: Per-genre manifestation settings.
        tags: The page's tags.
        comment: Free-form comment for the metadata.
        overwrite: How the tagging tool treats the original file.
        policy: Missing-fragment policy for the file name.
        tz: Timezone for timestamp fragments.
        now: Fixed time for timestamp fragments.

    Returns:
        A PreparedPage, or None when the name aborts under the absent policy.

    Raises:
        MissingComponentError: Under the fail policy, for an incomplete name.
        ConfigurationMissingError: If the tags' genre is not configured.
    """
    tag_list = list(tags)
    manifestation = manifest(tag_list, taxonomy, genres)

    destination = compose_path(
        page,
        root,
        source.suffix,
        tag_list,
        taxonomy,
        genres,
        policy=policy,
        tz=tz,
        now=now,
        manifestation=manifestation,
    )
    if destination is None:
        logger.debug("Page of %s has no complete name; skipping", page.series.name)
        return None

    title = page.properties.get(TITLE_PROPERTY)
    pending = PendingMetadata(
        path=destination,
        title=str(title) if title is not None else None,
        comment=comment,
        tags=manifestation.metadata_keywords,
        overwrite=overwrite,
    )

    logger.debug("Prepared %s -> %s", source, destination)
    return PreparedPage(
        source=source,
        destination=destination,
        pending=pending,
        manifestation=manifestation,
    )
