"""Raw reflections read from a reflection dump."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from docreflect.element_kind import ElementKind
from docreflect.raw_reflection import ReflectionLookupError


@dataclass(eq=False)
class RawFile:
    """A parsed source file and its file-level doc comment annotations."""

    name: str
    annotations: dict[str, Any] = field(default_factory=dict)


@dataclass(eq=False)
class RawExtensionItem:
    """A parsed extension."""

    name: str

    def get_name(self) -> str:
        return self.name

    def get_kind(self) -> ElementKind:
        return ElementKind.EXTENSION

    def is_internal(self) -> bool:
        return True

    def is_tokenized(self) -> bool:
        return False


@dataclass(eq=False)
class RawItem:
    """A parsed element; related elements are resolved through its index."""

    kind: ElementKind
    name: str
    file: RawFile | None = None
    namespace: str = ""
    namespace_aliases: dict[str, str] = field(default_factory=dict)
    doc_comment: str | None = None
    annotations: dict[str, Any] = field(default_factory=dict)
    declaring_class: str | None = None  # name of the declaring class
    extension: str | None = None  # name of the defining extension
    start_position: int = 0
    end_position: int = 0
    start_line: int = 0
    end_line: int = 0
    internal: bool = False
    tokenized: bool = True
    deprecated: bool = False
    index: ReflectionIndex | None = field(default=None, repr=False)

    def get_name(self) -> str:
        return self.name

    def get_kind(self) -> ElementKind:
        return self.kind

    def get_doc_comment(self) -> str | None:
        return self.doc_comment

    def get_annotations(self) -> dict[str, Any]:
        return self.annotations

    def get_file_annotations(self) -> dict[str, Any]:
        return self.file.annotations if self.file else {}

    def get_file_name(self) -> str | None:
        return self.file.name if self.file else None

    def get_namespace_name(self) -> str:
        return self.namespace

    def get_namespace_aliases(self) -> dict[str, str]:
        return self.namespace_aliases

    def get_extension_name(self) -> str | None:
        return self.extension

    def get_extension(self) -> RawExtensionItem | None:
        """Resolve the defining extension; raise if it is unknown."""
        if not self.extension:
            return None
        found = self.index.get_extension(self.extension) if self.index else None
        if found is None:
            raise ReflectionLookupError(f"Extension {self.extension} not found")
        return found

    def get_declaring_class_name(self) -> str | None:
        return self.declaring_class

    def get_declaring_class(self) -> RawItem | None:
        """Resolve the declaring class; raise if it is unknown."""
        if not self.declaring_class:
            return None
        found = self.index.get_class(self.declaring_class) if self.index else None
        if found is None:
            raise ReflectionLookupError(f"Class {self.declaring_class} not found")
        return found

    def get_start_position(self) -> int:
        return self.start_position

    def get_end_position(self) -> int:
        return self.end_position

    def get_start_line(self) -> int:
        return self.start_line

    def get_end_line(self) -> int:
        return self.end_line

    def is_internal(self) -> bool:
        return self.internal

    def is_tokenized(self) -> bool:
        return self.tokenized

    def is_deprecated(self) -> bool:
        return self.deprecated


def _class_key(name: str) -> str:
    return name.lstrip("\\").lower()


class ReflectionIndex:
    """All raw reflections of a run, in dump order."""

    def __init__(self) -> None:
        """Initialize an empty index."""
        self.items: list[RawItem] = []
        self.files: list[RawFile] = []
        self.classes: dict[str, RawItem] = {}  # lower name -> class
        self.extensions: dict[str, RawExtensionItem] = {}  # lower name -> ext

    def add_item(self, item: RawItem) -> None:
        """Register an element and link it to this index."""
        item.index = self
        self.items.append(item)
        if item.kind is ElementKind.CLASS:
            self.classes.setdefault(_class_key(item.name), item)

    def add_extension(self, extension: RawExtensionItem) -> None:
        self.extensions.setdefault(extension.name.lower(), extension)

    def get_class(self, name: str) -> RawItem | None:
        """Look up a class, ignoring case and a leading namespace separator."""
        return self.classes.get(_class_key(name))

    def get_extension(self, name: str) -> RawExtensionItem | None:
        return self.extensions.get(name.lower())

    def __iter__(self) -> Iterator[RawItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
