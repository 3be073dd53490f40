"""Closed set of reflected element kinds."""

from enum import Enum


class ElementKind(str, Enum):
    """Kind of a reflected program construct."""

    CLASS = "class"
    FUNCTION = "function"
    METHOD = "method"
    PROPERTY = "property"
    CONSTANT = "constant"
    EXTENSION = "extension"

    @classmethod
    def parse(cls, kind: str) -> "ElementKind":
        """Parse a kind name, ignoring case and surrounding whitespace."""
        k = kind.strip().lower()
        for member in cls:
            if member.value == k:
                return member
        raise ValueError(f"Unknown element kind: {kind!r}")
