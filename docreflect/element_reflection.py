"""Documentation-facing view of one reflected program element.

The facade derives the facts a renderer needs from the raw parser output:
annotations (with file-level tags merged in), descriptions, namespace identity,
and the documented/deprecated/main status. Expensive values are computed on
first use and kept for the lifetime of the facade.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

from docreflect.annotation_names import (
    IGNORE,
    INTERNAL,
    LONG_DESCRIPTION,
    SHORT_DESCRIPTION,
    VAR,
)
from docreflect.annotation_store import AnnotationStore
from docreflect.description import (
    description_from_var,
    description_text,
    join_descriptions,
)
from docreflect.file_level_annotations import file_level_annotations
from docreflect.raw_reflection import RawReflection, ReflectionLookupError
from docreflect.reflection_base import ReflectionBase

if TYPE_CHECKING:
    from docreflect.class_reflection import ClassReflection
    from docreflect.extension_reflection import ExtensionReflection
    from docreflect.reflection_factory import ReflectionFactory

logger = logging.getLogger(__name__)

INTERNAL_PSEUDO_NAMESPACE = "PHP"
NO_PSEUDO_NAMESPACE = "None"


class ElementReflection(ReflectionBase):
    """Base facade for classes, functions, methods, properties and constants."""

    belongs_to_class = False
    has_var_fallback = False

    def __init__(
        self, reflection: RawReflection, factory: ReflectionFactory
    ) -> None:
        """Initialize the facade with empty caches."""
        super().__init__(reflection, factory)
        self._is_documented: bool | None = None
        self._annotations: AnnotationStore | None = None
        self._lock = threading.RLock()

    def inherits_file_annotations(self) -> bool:
        """Check whether file-level annotations apply to this element."""
        return False

    def get_declaring_class(self) -> ClassReflection | None:
        return None

    # -----------------------------
    # Status flags
    # -----------------------------

    def is_documented(self) -> bool:
        """Check whether the element appears in generated documentation."""
        with self._lock:
            if self._is_documented is None:
                self._is_documented = self._compute_documented()
            return self._is_documented

    def _compute_documented(self) -> bool:
        reflection = self._reflection
        if not (reflection.is_tokenized() or reflection.is_internal()):
            return False

        raw = AnnotationStore.from_raw(reflection.get_annotations() or {})
        if reflection.is_internal():
            return False
        if not self.configuration.is_internal_documented() and raw.has(INTERNAL):
            return False
        if raw.has(IGNORE):
            return False
        return True

    def is_deprecated(self) -> bool:
        """Check the element, or for class members their class, is deprecated."""
        if self._reflection.is_deprecated():
            return True
        if self.belongs_to_class:
            declaring_class = self.get_declaring_class()
            return declaring_class is not None and declaring_class.is_deprecated()
        return False

    def is_main(self) -> bool:
        """Check whether the element belongs to the main project."""
        main = self.configuration.get_main()
        return not main or self.get_name().startswith(main)

    def in_package(self) -> bool:
        """Always False; packages were replaced by namespaces (template compat)."""
        return False

    def in_namespace(self) -> bool:
        """Always True (template compat)."""
        return True

    # -----------------------------
    # Namespaces
    # -----------------------------

    def get_namespace_name(self) -> str:
        """Return the namespace in the spelling first seen during this run."""
        name = self._reflection.get_namespace_name()
        if not name:
            return ""
        return self._factory.get_namespace_registry().canonical(name)

    def get_pseudo_namespace_name(self) -> str:
        """Return the namespace used for grouping, with sentinels for none/built-in."""
        if self.is_internal():
            return INTERNAL_PSEUDO_NAMESPACE
        return self.get_namespace_name() or NO_PSEUDO_NAMESPACE

    def get_namespace_aliases(self) -> dict[str, str]:
        return dict(self._reflection.get_namespace_aliases() or {})

    # -----------------------------
    # Source
    # -----------------------------

    def get_extension(self) -> ExtensionReflection | None:
        """Return the extension defining this element, if any."""
        try:
            extension = self._reflection.get_extension()
        except ReflectionLookupError as exc:
            logger.warning("Cannot resolve extension of %s: %s", self.get_name(), exc)
            return None
        if extension is None:
            return None
        return self._factory.create_from_reflection(extension)

    def get_extension_name(self) -> str:
        return self._reflection.get_extension_name() or ""

    def get_start_position(self) -> int:
        return self._reflection.get_start_position()

    def get_end_position(self) -> int:
        return self._reflection.get_end_position()

    def get_doc_comment(self) -> str:
        return self._reflection.get_doc_comment() or ""

    # -----------------------------
    # Descriptions
    # -----------------------------

    def get_short_description(self) -> str:
        """Return the first paragraph of the doc comment.

        Properties and constants without one fall back to the text after the
        type in their @var annotation.
        """
        raw = self._reflection.get_annotations() or {}
        short = description_text(raw.get(SHORT_DESCRIPTION))
        if short:
            return short
        if self.has_var_fallback:
            return description_from_var(self.get_annotation(VAR))
        return ""

    def get_long_description(self) -> str:
        """Return the short description followed by the rest of the doc comment."""
        raw = self._reflection.get_annotations() or {}
        long = description_text(raw.get(LONG_DESCRIPTION))
        return join_descriptions(self.get_short_description(), long)

    # -----------------------------
    # Annotations
    # -----------------------------

    def _annotation_store(self) -> AnnotationStore:
        with self._lock:
            if self._annotations is None:
                store = AnnotationStore.from_raw(
                    self._reflection.get_annotations() or {}
                )
                if self.inherits_file_annotations():
                    store.merge_missing(
                        file_level_annotations(
                            store.as_dict(),
                            self._reflection.get_file_annotations() or {},
                        )
                    )
                self._annotations = store
                logger.debug(
                    "Built %d annotation(s) for %s", len(store), self.get_name()
                )
            return self._annotations

    def get_annotations(self) -> dict[str, list[Any]]:
        """Return all annotations, keyed by lower-cased name."""
        return self._annotation_store().as_dict()

    def get_annotation(self, name: str) -> list[Any]:
        """Return the values of one annotation, or an empty list."""
        return self._annotation_store().get(name)

    def has_annotation(self, name: str) -> bool:
        return self._annotation_store().has(name)

    def add_annotation(self, name: str, value: Any) -> None:
        """Append a value to an annotation, keeping existing values."""
        with self._lock:
            self._annotation_store().add(name, value)
