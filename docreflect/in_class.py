"""Capability of elements that can be declared inside a class."""

import logging
from typing import TYPE_CHECKING, Any

from docreflect.raw_reflection import ReflectionLookupError

if TYPE_CHECKING:
    from docreflect.class_reflection import ClassReflection

logger = logging.getLogger(__name__)


class InClassMixin:
    """Declaring class lookup for methods, properties and constants."""

    belongs_to_class = True

    _reflection: Any
    _factory: Any

    def get_declaring_class_name(self) -> str | None:
        """Return the declaring class name, or None outside a class."""
        return self._reflection.get_declaring_class_name() or None

    def get_declaring_class(self) -> "ClassReflection | None":
        """Return the declaring class facade, or None if absent or unresolved."""
        try:
            raw = self._reflection.get_declaring_class()
        except ReflectionLookupError as exc:
            logger.warning(
                "Cannot resolve declaring class of %s: %s",
                self._reflection.get_name(),
                exc,
            )
            return None
        if raw is None:
            return None
        return self._factory.create_from_reflection(raw)
