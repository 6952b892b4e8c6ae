# ABOUTME: Static lookup table mapping known tags to a category and display variants.
# ABOUTME: Categories drive genre agreement; variants drive keyword and social output.

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

DEFAULT_SPECIAL_CATEGORY = "special"
DEFAULT_MIXED_GENRE = "mixed"


@dataclass(frozen=True)
class TagRecord:
    """What the taxonomy knows about a single tag.

    plain is the general display name, ascii an ASCII-safe spelling for
    embedded metadata, and social the spelling used on the social platform.
    Any of them may be missing.
    """

    category: str
    plain: str | None = None
    ascii: str | None = None
    social: str | None = None

    @property
    def keyword(self) -> str | None:
        """Variant written into file metadata: ASCII-safe first, then plain."""
        return self.ascii if self.ascii is not None else self.plain

    @property
    def social_name(self) -> str | None:
        """Variant used for social tags: platform-specific first, then plain."""
        return self.social if self.social is not None else self.plain


class TagTaxonomy:
    """Read-only tag table plus the reserved special and mixed markers."""

    def __init__(
        self,
        records: Mapping[str, TagRecord],
        *,
        special_category: str = DEFAULT_SPECIAL_CATEGORY,
        mixed_genre: str = DEFAULT_MIXED_GENRE,
    ) -> None:
        self._records = dict(records)
        self.special_category = special_category
        self.mixed_genre = mixed_genre

    def get(self, tag: str) -> TagRecord | None:
        """The record for a tag, or None if the tag is unknown."""
        return self._records.get(tag)

    def category_of(self, tag: str) -> str | None:
        """Category of a tag; unknown tags have no category (None)."""
        record = self._records.get(tag)
        return record.category if record is not None else None

    def is_special(self, tag: str) -> bool:
        """Whether a tag belongs to the reserved special category."""
        return self.category_of(tag) == self.special_category

    def without_special(self, tags: Iterable[str]) -> list[str]:
        """The tags that are not in the special category, order preserved."""
        return [tag for tag in tags if not self.is_special(tag)]

    def categories(self) -> set[str]:
        """Every category used by at least one tag."""
        return {record.category for record in self._records.values()}

    def __contains__(self, tag: object) -> bool:
        return tag in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._records))
