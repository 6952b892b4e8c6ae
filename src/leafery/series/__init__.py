# ABOUTME: Public API for book series, page identities, and filename templates.
# ABOUTME: Exports the series model, the registry, and the template resolver.

from leafery.series.model import (
    AxisRef,
    BookSeries,
    Fragment,
    LiteralText,
    PropertyRef,
    Specificity,
    TagsRef,
    Timestamp,
)
from leafery.series.page import PageConstructionError, PageIdentity
from leafery.series.registry import SeriesNotFoundError, SeriesRegistry
from leafery.series.template import (
    MissingComponentError,
    MissingPolicy,
    encode_letters,
    resolve_template,
)

__all__ = [
    "AxisRef",
    "BookSeries",
    "Fragment",
    "LiteralText",
    "MissingComponentError",
    "MissingPolicy",
    "PageConstructionError",
    "PageIdentity",
    "PropertyRef",
    "SeriesNotFoundError",
    "SeriesRegistry",
    "Specificity",
    "TagsRef",
    "Timestamp",
    "encode_letters",
    "resolve_template",
]
