# ABOUTME: PageIdentity binds a page-number vector and properties to a book series.
# ABOUTME: The vector is validated against the series' specificities on construction.

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from leafery.series.model import BookSeries

PropertyValue = str | int | float


class PageConstructionError(ValueError):
    """Raised when a page-number vector does not fit its series."""


@dataclass(frozen=True)
class PageIdentity:
    """One page of a series: a number per axis plus auxiliary properties.

    A number of None means the axis is not bound; templates treat the
    matching fragment as missing. Properties feed PropertyRef fragments
    (the title, typically). They are stored read-only and left out of the
    hash, so equal pages hash alike.
    """

    series: BookSeries
    numbers: tuple[int | None, ...]
    properties: Mapping[str, PropertyValue] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "numbers", tuple(self.numbers))
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

        expected = len(self.series.specificities)
        if len(self.numbers) != expected:
            raise PageConstructionError(
                f"series {self.series.name!r} expects {expected} number(s), "
                f"got {len(self.numbers)}"
            )

        for spec, value in zip(self.series.specificities, self.numbers, strict=True):
            if value is None:
                continue
            if not spec.contains(value):
                raise PageConstructionError(
                    f"{spec.name} {value} is outside {spec.minimum}..{spec.maximum} "
                    f"for series {self.series.name!r}"
                )

        for key, value in self.properties.items():
            if not isinstance(value, str | int | float):
                raise PageConstructionError(
                    f"property {key!r} has unsupported type {type(value).__name__}"
                )

    @classmethod
    def of(
        cls,
        series: BookSeries,
        numbers: Sequence[int | None],
        **properties: PropertyValue,
    ) -> "PageIdentity":
        """Convenience constructor taking properties as keyword arguments."""
        return cls(series=series, numbers=tuple(numbers), properties=properties)

    def value_of(self, axis: str) -> int | None:
        """The number bound to an axis, or None when unbound."""
        return self.numbers[self.series.axis_index(axis)]

    @property
    def is_complete(self) -> bool:
        """Whether every axis has a bound number."""
        return all(value is not None for value in self.numbers)
