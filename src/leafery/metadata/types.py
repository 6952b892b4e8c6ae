# ABOUTME: Core metadata data structures handed to the argfile serializer.
# ABOUTME: PendingMetadata is the interchange format between page preparation and writing.

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class OverwritePolicy(Enum):
    """How the external tagging tool should treat the original file."""

    NONE = "none"
    ORIGINAL = "overwrite_original"
    ORIGINAL_IN_PLACE = "overwrite_original_in_place"


@dataclass
class PendingMetadata:
    """Metadata waiting to be injected into a single file.

    Title and comment are optional scalars; tags keep their order since the
    serializer writes them one directive per element.
    """

    path: Path
    title: str | None = None
    comment: str | None = None
    tags: list[str] = field(default_factory=list)
    overwrite: OverwritePolicy = OverwritePolicy.NONE
