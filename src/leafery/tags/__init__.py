# ABOUTME: Tag taxonomy, genre resolution, and tag manifestation.
# ABOUTME: Exports the lookup table types and the resolvers built on them.

from leafery.tags.manifest import (
    ConfigurationMissingError,
    GenreConfig,
    GenreTable,
    ManifestationResult,
    manifest,
    resolve_genre,
)
from leafery.tags.taxonomy import TagRecord, TagTaxonomy

__all__ = [
    "ConfigurationMissingError",
    "GenreConfig",
    "GenreTable",
    "ManifestationResult",
    "TagRecord",
    "TagTaxonomy",
    "manifest",
    "resolve_genre",
]
