"""Creation of reflection facades for one documentation run."""

import logging
import threading
from typing import Any

from docreflect.class_reflection import ClassReflection
from docreflect.constant_reflection import ConstantReflection
from docreflect.documentation_config import DocumentationConfig
from docreflect.element_kind import ElementKind
from docreflect.extension_reflection import ExtensionReflection
from docreflect.function_reflection import FunctionReflection
from docreflect.method_reflection import MethodReflection
from docreflect.namespace_registry import NamespaceRegistry
from docreflect.property_reflection import PropertyReflection
from docreflect.reflection_base import ReflectionBase

logger = logging.getLogger(__name__)

FACADE_TYPES: dict[ElementKind, type[ReflectionBase]] = {
    ElementKind.CLASS: ClassReflection,
    ElementKind.FUNCTION: FunctionReflection,
    ElementKind.METHOD: MethodReflection,
    ElementKind.PROPERTY: PropertyReflection,
    ElementKind.CONSTANT: ConstantReflection,
    ElementKind.EXTENSION: ExtensionReflection,
}


class UnsupportedReflectionError(TypeError):
    """Raised when a raw reflection has no facade type."""


class ReflectionFactory:
    """Wraps raw reflections, returning one facade per raw object.

    The factory is the context of a documentation run: it holds the
    configuration and the namespace registry shared by all facades.
    """

    def __init__(
        self,
        config: DocumentationConfig,
        namespaces: NamespaceRegistry | None = None,
    ) -> None:
        """Initialize the factory for one run."""
        self.config = config
        self.namespaces = namespaces if namespaces is not None else NamespaceRegistry()
        self._facades: dict[int, ReflectionBase] = {}  # id(raw) -> facade
        self._lock = threading.Lock()

    def get_configuration(self) -> DocumentationConfig:
        return self.config

    def get_namespace_registry(self) -> NamespaceRegistry:
        return self.namespaces

    def create_from_reflection(self, reflection: Any) -> Any:
        """Return the facade for a raw reflection, creating it on first use."""
        key = id(reflection)
        with self._lock:
            facade = self._facades.get(key)
            if facade is None:
                facade_type = self._facade_type(reflection)
                facade = facade_type(reflection, self)
                # The facade keeps the raw object alive, so its id stays unique.
                self._facades[key] = facade
                logger.debug("Created %s", facade)
            return facade

    def __len__(self) -> int:
        return len(self._facades)

    @staticmethod
    def _facade_type(reflection: Any) -> type[ReflectionBase]:
        try:
            kind = reflection.get_kind()
            if not isinstance(kind, ElementKind):
                kind = ElementKind.parse(str(kind))
        except (AttributeError, ValueError) as exc:
            raise UnsupportedReflectionError(
                f"Unsupported reflection: {reflection!r}"
            ) from exc
        return FACADE_TYPES[kind]
