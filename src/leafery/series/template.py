# ABOUTME: Resolves a series filename template against a page identity.
# ABOUTME: Missing fragments fail, abort to None, or become a '*' wildcard per policy.

from datetime import datetime, timezone, tzinfo
from enum import Enum

from leafery.series.model import (
    AxisRef,
    Fragment,
    LiteralText,
    PropertyRef,
    TagsRef,
    Timestamp,
)
from leafery.series.page import PageIdentity

WILDCARD = "*"

UTC = timezone.utc


class MissingPolicy(str, Enum):
    """What to do when a template fragment cannot be resolved."""

    FAIL = "fail"
    ABSENT = "absent"
    GLOB = "glob"


class MissingComponentError(Exception):
    """Raised under the fail policy when a template fragment has no value."""

    def __init__(self, fragment: Fragment, series: str) -> None:
        super().__init__(f"Cannot resolve {describe_fragment(fragment)} for series '{series}'")
        self.fragment = fragment
        self.series = series


class _Missing:
    """Marker for a fragment that rendered to nothing."""


_MISSING = _Missing()


def describe_fragment(fragment: Fragment) -> str:
    """Short human-readable description of a template fragment."""
    if isinstance(fragment, AxisRef):
        return f"axis '{fragment.axis}'"
    if isinstance(fragment, PropertyRef):
        return f"property '{fragment.key}'"
    if isinstance(fragment, TagsRef):
        return "tag fragment"
    if isinstance(fragment, Timestamp):
        return f"timestamp '{fragment.fmt}'"
    return f"literal '{fragment.text}'"


def encode_letters(number: int) -> str:
    """Encode a positive integer as bijective base-26 letters.

    1 -> A, 26 -> Z, 27 -> AA, 52 -> AZ, 53 -> BA. There is no zero digit,
    so 0 and negative numbers have no representation.
    """
    if number < 1:
        raise ValueError(f"letter encoding needs a positive number, got {number}")

    letters: list[str] = []
    while number > 0:
        number, remainder = divmod(number - 1, 26)
        letters.append(chr(ord("A") + remainder))
    return "".join(reversed(letters))


def _render_axis(
    fragment: AxisRef, page: PageIdentity, limit_index: int | None
) -> str | _Missing:
    position = page.series.axis_index(fragment.axis)
    if limit_index is not None and position > limit_index:
        return _MISSING

    value = page.numbers[position]
    if value is None:
        return _MISSING

    if fragment.letters:
        return encode_letters(value)
    return str(value).zfill(fragment.pad)


def _render(
    fragment: Fragment,
    page: PageIdentity,
    *,
    limit_index: int | None,
    tz: tzinfo,
    now: datetime | None,
    tag_fragment: str | None,
) -> str | _Missing:
    """Render one fragment, or return the missing marker."""
    if isinstance(fragment, LiteralText):
        return fragment.text
    if isinstance(fragment, Timestamp):
        moment = now.astimezone(tz) if now is not None else datetime.now(tz)
        return moment.strftime(fragment.fmt)
    if isinstance(fragment, AxisRef):
        return _render_axis(fragment, page, limit_index)
    if isinstance(fragment, PropertyRef):
        if fragment.key not in page.properties:
            return _MISSING
        return str(page.properties[fragment.key])
    if isinstance(fragment, TagsRef):
        return tag_fragment if tag_fragment is not None else _MISSING
    raise TypeError(f"unknown template fragment: {fragment!r}")


def resolve_template(
    page: PageIdentity,
    policy: MissingPolicy | str = MissingPolicy.GLOB,
    limit: str | None = None,
    *,
    tz: tzinfo = UTC,
    now: datetime | None = None,
    tag_fragment: str | None = None,
    base: str = "",
) -> str | None:
    """Render the page's series template into a name.

    Fragments are rendered in template order. An axis past the limit axis,
    an unbound axis, an unknown property key, or a tag slot without
    tag_fragment counts as missing, and the policy decides:

    - glob: the fragment becomes '*' and rendering continues.
    - absent: the whole resolution returns None.
    - fail: MissingComponentError is raised.

    Args:
        page: The page identity to render.
        policy: Missing-fragment policy (default glob).
        limit: Optional axis name; axes declared after it count as missing.
        tz: Timezone for timestamp fragments.
        now: Fixed time for timestamp fragments (defaults to the current time).
        tag_fragment: Text for the template's tag slot, if any.
        base: Prefix prepended to the rendered fragments.

    Returns:
        The rendered name, or None when aborted under the absent policy.

    Raises:
        MissingComponentError: Under the fail policy.
        ValueError: If limit names an axis the series does not have.
    """
    policy = MissingPolicy(policy)
    limit_index = page.series.axis_index(limit) if limit is not None else None

    parts: list[str] = [base]
    for fragment in page.series.template:
        rendered = _render(
            fragment,
            page,
            limit_index=limit_index,
            tz=tz,
            now=now,
            tag_fragment=tag_fragment,
        )
        if not isinstance(rendered, _Missing):
            parts.append(rendered)
        elif policy is MissingPolicy.GLOB:
            parts.append(WILDCARD)
        elif policy is MissingPolicy.ABSENT:
            return None
        else:
            raise MissingComponentError(fragment, page.series.name)

    return "".join(parts)
