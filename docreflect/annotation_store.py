"""Per-element store of documentation annotations."""

from collections.abc import Iterator, Mapping
from typing import Any

from docreflect.annotation_names import DESCRIPTION_MARKERS


def _as_values(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return list(value)
    return [value]


class AnnotationStore:
    """Annotation name (lower-cased) to ordered list of raw values.

    Values for a name are only ever appended, never replaced.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._values: dict[str, list[Any]] = {}

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "AnnotationStore":
        """Build a store from a parser annotation map.

        Keys are lower-cased; names differing only in case are concatenated in
        input order. The description markers are dropped.
        """
        store = cls()
        for name, value in raw.items():
            key = str(name).lower()
            if key in DESCRIPTION_MARKERS:
                continue
            store._values.setdefault(key, []).extend(_as_values(value))
        return store

    def get(self, name: str) -> list[Any]:
        """Return a copy of the values stored for a name, or an empty list."""
        return list(self._values.get(name.lower(), []))

    def has(self, name: str) -> bool:
        """Check whether a name has at least one value."""
        return bool(self._values.get(name.lower()))

    def add(self, name: str, value: Any) -> None:
        """Append a value for a name, creating the name if absent.

        Description markers are not annotations and are ignored.
        """
        key = name.lower()
        if key in DESCRIPTION_MARKERS:
            return
        self._values.setdefault(key, []).append(value)

    def merge_missing(self, other: Mapping[str, list[Any]]) -> None:
        """Copy entries whose name has no value here yet."""
        for name, values in other.items():
            key = name.lower()
            if not self._values.get(key):
                self._values[key] = list(values)

    def as_dict(self) -> dict[str, list[Any]]:
        """Return a copy of the whole mapping."""
        return {name: list(values) for name, values in self._values.items()}

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)
