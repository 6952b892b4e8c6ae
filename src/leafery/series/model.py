# ABOUTME: Data structures describing a book series: numbering axes and filename template.
# ABOUTME: BookSeries is immutable once built and validated at construction time.

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Specificity:
    """A named, bounded numeric axis identifying a page within a series."""

    name: str
    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            msg = (
                f"specificity {self.name!r} has minimum {self.minimum} "
                f"above maximum {self.maximum}"
            )
            raise ValueError(msg)

    def contains(self, value: int) -> bool:
        """Whether value lies within the axis bounds (inclusive)."""
        return self.minimum <= value <= self.maximum


@dataclass(frozen=True)
class LiteralText:
    """Template text emitted verbatim."""

    text: str


@dataclass(frozen=True)
class Timestamp:
    """Current time rendered with a strftime format."""

    fmt: str


@dataclass(frozen=True)
class AxisRef:
    """Reference to a page-number axis.

    Rendered as a zero-padded number, or as letters (1 -> A, 27 -> AA)
    when letters is set.
    """

    axis: str
    pad: int = 0
    letters: bool = False


@dataclass(frozen=True)
class PropertyRef:
    """Reference to a key in the page's property table."""

    key: str


@dataclass(frozen=True)
class TagsRef:
    """Slot filled by the filename fragment of the page's tag manifestation."""


Fragment = LiteralText | Timestamp | AxisRef | PropertyRef | TagsRef


@dataclass(frozen=True)
class BookSeries:
    """A numbered serial publication and the way its pages are named.

    The template is an ordered sequence of fragments. Axis names must be
    unique and every AxisRef must point at one of them.
    """

    name: str
    specificities: tuple[Specificity, ...]
    template: tuple[Fragment, ...] = field(default_factory=tuple)
    folder: str | None = None

    def __post_init__(self) -> None:
        # Stored as tuples even when built from lists.
        object.__setattr__(self, "specificities", tuple(self.specificities))
        object.__setattr__(self, "template", tuple(self.template))

        if not self.specificities:
            raise ValueError(f"series {self.name!r} declares no specificities")

        names = [spec.name for spec in self.specificities]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(
                f"series {self.name!r} repeats axis name(s): {', '.join(duplicates)}"
            )

        bounds = {spec.name: spec for spec in self.specificities}
        for fragment in self.template:
            if not isinstance(fragment, AxisRef):
                continue
            if fragment.axis not in bounds:
                raise ValueError(
                    f"series {self.name!r} template references unknown axis {fragment.axis!r}"
                )
            # Letter encoding has no digit for zero or below.
            if fragment.letters and bounds[fragment.axis].minimum < 1:
                raise ValueError(
                    f"series {self.name!r} letters axis {fragment.axis!r} "
                    f"needs a minimum of at least 1, got {bounds[fragment.axis].minimum}"
                )

    @property
    def axis_names(self) -> list[str]:
        """Axis names in declaration order."""
        return [spec.name for spec in self.specificities]

    @property
    def output_folder(self) -> str:
        """Folder the series' files live in, below the archive root."""
        return self.folder or self.name

    @property
    def uses_tags(self) -> bool:
        """Whether the template reserves a slot for the tag manifestation."""
        return any(isinstance(fragment, TagsRef) for fragment in self.template)

    def axis_index(self, axis: str) -> int:
        """Position of an axis among the specificities.

        Raises:
            ValueError: If the series has no axis with that name.
        """
        try:
            return self.axis_names.index(axis)
        except ValueError:
            raise ValueError(f"series {self.name!r} has no axis {axis!r}") from None
