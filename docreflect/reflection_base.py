"""Common surface of every reflection facade."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from docreflect.documentation_config import DocumentationConfig
    from docreflect.reflection_factory import ReflectionFactory

NAMESPACE_SEPARATOR = "\\"


class ReflectionBase:
    """Wraps one raw reflection produced by the parser."""

    def __init__(self, reflection: Any, factory: "ReflectionFactory") -> None:
        """Initialize the facade over a raw reflection."""
        self._reflection = reflection
        self._factory = factory

    @property
    def configuration(self) -> "DocumentationConfig":
        return self._factory.get_configuration()

    def get_name(self) -> str:
        """Return the fully qualified name."""
        return self._reflection.get_name()

    def get_short_name(self) -> str:
        """Return the name without its namespace."""
        return self.get_name().rsplit(NAMESPACE_SEPARATOR, 1)[-1]

    def get_pretty_name(self) -> str:
        """Return the name as shown in generated documentation."""
        return self.get_name()

    def is_internal(self) -> bool:
        """Check whether this is a built-in definition without source."""
        return bool(self._reflection.is_internal())

    def is_tokenized(self) -> bool:
        """Check whether this element was parsed from source."""
        return bool(self._reflection.is_tokenized())

    def get_file_name(self) -> str | None:
        return self._reflection.get_file_name()

    def get_start_line(self) -> int:
        return self._reflection.get_start_line()

    def get_end_line(self) -> int:
        return self._reflection.get_end_line()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_name()!r})"
