"""Derivation of short and long descriptions from doc comment parts."""

import re
from typing import Any

_VAR_SPLIT_RE = re.compile(r"\s+|$")


def description_text(value: Any) -> str:
    """Render a parsed description marker as text.

    Parsers store the text either as a string or as a list of paragraphs.
    """
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        paragraphs = (description_text(part) for part in value)
        return "\n".join(p for p in paragraphs if p)
    return str(value).strip()


def description_from_var(values: list[Any]) -> str:
    """Return the prose following the type in the first @var value.

    "int The counter value" gives "The counter value". A value that is missing,
    not a string or has no prose after the type gives "".
    """
    if not values or not isinstance(values[0], str):
        return ""
    parts = _VAR_SPLIT_RE.split(values[0], maxsplit=1)
    return parts[1] if len(parts) > 1 else ""


def join_descriptions(short: str, long: str) -> str:
    """Append the long description to the short one, separated by a blank line."""
    if long:
        return f"{short}\n\n{long}"
    return short
