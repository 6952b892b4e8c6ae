# ABOUTME: Serializes pending metadata into exiftool argfile records (-@ ARGFILE).
# ABOUTME: Records are appended to the argfile, each terminated by -execute.

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from leafery.metadata.types import OverwritePolicy, PendingMetadata

logger = logging.getLogger(__name__)

DEFAULT_FIELD_CODES: Mapping[str, str] = {
    "title": "XMP-dc:Title",
    "comment": "XMP-dc:Description",
    "tags": "XMP-dc:Subject",
}

# exiftool reads one argument per line, so values cannot span lines.
_LINE_BREAKS = ("\n", "\r")


class ArgfileError(ValueError):
    """Raised when metadata cannot be expressed in argfile syntax."""


def _check_line(value: str, field: str) -> str:
    if any(brk in value for brk in _LINE_BREAKS):
        raise ArgfileError(f"Value for {field} contains a line break: {value!r}")
    return value


def _field_lines(code: str, value: str | Sequence[str] | None) -> list[str]:
    """Directives for one field.

    A scalar is a single direct set. A sequence clears the field with an
    empty set, then appends each element in order.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [f"-{code}={_check_line(value, code)}"]

    lines = [f"-{code}="]
    lines.extend(f"-{code}+={_check_line(item, code)}" for item in value)
    return lines


def _overwrite_lines(policy: OverwritePolicy) -> list[str]:
    if policy is OverwritePolicy.NONE:
        return []
    return [f"-{policy.value}"]


def serialize_metadata(
    pending: PendingMetadata,
    field_codes: Mapping[str, str] = DEFAULT_FIELD_CODES,
) -> bytes:
    """Render one argfile record for a file.

    Order: title, comment, tags, overwrite option, target path, -execute.

    Args:
        pending: The metadata to write and the file it belongs to.
        field_codes: exiftool tag names for the title, comment, and tags fields.

    Returns:
        The UTF-8 encoded record, newline terminated.

    Raises:
        ArgfileError: If a value or the path contains a line break.
    """
    lines: list[str] = []
    lines += _field_lines(field_codes["title"], pending.title)
    lines += _field_lines(field_codes["comment"], pending.comment)
    lines += _field_lines(field_codes["tags"], list(pending.tags))
    lines += _overwrite_lines(pending.overwrite)
    lines.append(_check_line(str(pending.path), "path"))
    lines.append("-execute")
    return ("\n".join(lines) + "\n").encode("utf-8")


def append_argfile(
    argfile: Path,
    *records: PendingMetadata,
    field_codes: Mapping[str, str] = DEFAULT_FIELD_CODES,
) -> int:
    """Append records to an argfile, creating it (and its parents) if needed.

    Every record is serialized before the file is opened, so a record that
    cannot be expressed leaves the argfile untouched.

    Returns:
        Number of records written.

    Raises:
        ArgfileError: If any record cannot be serialized.
    """
    payload = b"".join(serialize_metadata(record, field_codes) for record in records)

    argfile.parent.mkdir(parents=True, exist_ok=True)
    with open(argfile, "ab") as f:
        f.write(payload)

    logger.debug("Appended %d record(s) to %s", len(records), argfile)
    return len(records)
