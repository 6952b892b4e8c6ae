# ABOUTME: Genre resolution and tag manifestation for a single tag set.
# ABOUTME: Expands tags into metadata keywords, social tags, and a filename fragment.

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from leafery.tags.taxonomy import TagTaxonomy

logger = logging.getLogger(__name__)


class ConfigurationMissingError(Exception):
    """Raised when a genre has no manifestation configuration."""

    def __init__(self, genre: str | None) -> None:
        super().__init__(f"No manifestation configuration for genre {genre!r}")
        self.genre = genre


@dataclass(frozen=True)
class GenreConfig:
    """Per-genre output settings.

    A head of None is simply not prepended to its list.
    """

    default_fragment: str
    metadata_head: str | None = None
    social_head: str | None = None


class GenreTable:
    """Explicit lookup table from genre marker to GenreConfig."""

    def __init__(self, configs: Mapping[str, GenreConfig]) -> None:
        self._configs = dict(configs)

    def lookup(self, genre: str | None) -> GenreConfig:
        """Return the configuration for a genre.

        Raises:
            ConfigurationMissingError: If the genre is not configured.
        """
        if genre is None or genre not in self._configs:
            raise ConfigurationMissingError(genre)
        return self._configs[genre]

    def missing_markers(self, taxonomy: TagTaxonomy) -> list[str]:
        """Genre markers the taxonomy can produce that have no configuration."""
        producible = (taxonomy.categories() - {taxonomy.special_category}) | {
            taxonomy.mixed_genre
        }
        return sorted(marker for marker in producible if marker not in self._configs)

    def __contains__(self, genre: object) -> bool:
        return genre in self._configs

    def __len__(self) -> int:
        return len(self._configs)


@dataclass
class ManifestationResult:
    """The three output representations of a tag set."""

    genre: str | None
    filename_fragment: str
    metadata_keywords: list[str] = field(default_factory=list)
    social_tags: list[str] = field(default_factory=list)


def _unique(tags: Iterable[str]) -> list[str]:
    """Drop repeated tags, keeping first occurrences in order."""
    return list(dict.fromkeys(tags))


def resolve_genre(tags: Iterable[str], taxonomy: TagTaxonomy) -> str | None:
    """Derive the genre of a tag set from agreement of its categories.

    Special-category tags are ignored. If every remaining tag shares one
    category, that category is the genre (None when all remaining tags are
    unknown to the taxonomy). An empty remainder or any disagreement yields
    the taxonomy's mixed marker.
    """
    categories = {
        taxonomy.category_of(tag)
        for tag in tags
        if taxonomy.category_of(tag) != taxonomy.special_category
    }
    if len(categories) == 1:
        return categories.pop()
    return taxonomy.mixed_genre


def manifest(
    tags: Iterable[str], taxonomy: TagTaxonomy, genres: GenreTable
) -> ManifestationResult:
    """Expand a tag set into keywords, social tags, and a filename fragment.

    Keywords use each tag's ASCII-safe name, falling back to its plain name;
    social tags use the platform name, falling back to the plain name. Tags
    with neither variant are left out. The filename fragment is the tag
    itself when exactly one non-special tag remains, otherwise the genre's
    default fragment.

    Raises:
        ConfigurationMissingError: If the resolved genre is not configured.
    """
    tag_list = _unique(tags)
    genre = resolve_genre(tag_list, taxonomy)
    config = genres.lookup(genre)

    metadata_keywords = [config.metadata_head] if config.metadata_head is not None else []
    social_tags = [config.social_head] if config.social_head is not None else []

    for tag in tag_list:
        record = taxonomy.get(tag)
        if record is None:
            continue
        if record.keyword is not None:
            metadata_keywords.append(record.keyword)
        if record.social_name is not None:
            social_tags.append(record.social_name)

    remaining = taxonomy.without_special(tag_list)
    fragment = remaining[0] if len(remaining) == 1 else config.default_fragment

    logger.debug(
        "Manifested %d tag(s) as genre %s, fragment %r", len(tag_list), genre, fragment
    )

    return ManifestationResult(
        genre=genre,
        filename_fragment=fragment,
        metadata_keywords=metadata_keywords,
        social_tags=social_tags,
    )
