# ABOUTME: Metadata package for the data handed to the external tagging tool.
# ABOUTME: Exports PendingMetadata and the overwrite policy markers.

from leafery.metadata.types import OverwritePolicy, PendingMetadata

__all__ = [
    "OverwritePolicy",
    "PendingMetadata",
]
