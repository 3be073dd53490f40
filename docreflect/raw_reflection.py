"""Query interface the reflection layer expects from the source parser."""

from typing import Any, Protocol


class ReflectionLookupError(LookupError):
    """Raised by a provider that cannot resolve a related element."""


class RawExtension(Protocol):
    """A parsed extension (a bundle of built-in definitions)."""

    def get_name(self) -> str: ...

    def get_kind(self) -> str: ...

    def is_internal(self) -> bool: ...

    def is_tokenized(self) -> bool: ...


class RawReflection(Protocol):
    """A parsed program element as produced by the tokenizer/parser."""

    def get_name(self) -> str: ...

    def get_kind(self) -> str: ...

    def get_doc_comment(self) -> str | None: ...

    def get_annotations(self) -> dict[str, Any]: ...

    def get_file_annotations(self) -> dict[str, Any]: ...

    def get_namespace_name(self) -> str: ...

    def get_namespace_aliases(self) -> dict[str, str]: ...

    def get_extension(self) -> "RawExtension | None": ...

    def get_extension_name(self) -> str | None: ...

    def get_file_name(self) -> str | None: ...

    def get_start_position(self) -> int: ...

    def get_end_position(self) -> int: ...

    def get_start_line(self) -> int: ...

    def get_end_line(self) -> int: ...

    def get_declaring_class(self) -> "RawReflection | None": ...

    def get_declaring_class_name(self) -> str | None: ...

    def is_internal(self) -> bool: ...

    def is_tokenized(self) -> bool: ...

    def is_deprecated(self) -> bool: ...
