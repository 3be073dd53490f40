"""Selection of file-scope annotations inherited by file-scoped elements."""

from collections.abc import Mapping
from typing import Any

from docreflect.annotation_names import FILE_LEVEL_ANNOTATIONS


def file_level_annotations(
    own: Mapping[str, list[Any]], file_annotations: Mapping[str, Any]
) -> dict[str, list[Any]]:
    """Return the file annotations an element should inherit.

    Only package, subpackage, author, license and copyright are considered,
    and only when the element has no non-empty value of its own.
    """
    lowered: dict[str, Any] = {}
    for name, value in file_annotations.items():
        lowered.setdefault(str(name).lower(), value)

    inherited: dict[str, list[Any]] = {}
    for name in FILE_LEVEL_ANNOTATIONS:
        value = lowered.get(name)
        if not value or own.get(name):
            continue
        inherited[name] = list(value) if isinstance(value, list) else [value]
    return inherited
