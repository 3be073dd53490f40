"""Facade for reflected constants."""

from docreflect.element_reflection import ElementReflection
from docreflect.in_class import InClassMixin


class ConstantReflection(InClassMixin, ElementReflection):
    """A class constant or a constant declared at file scope.

    Only file-scope constants inherit file-level annotations.
    """

    has_var_fallback = True

    def inherits_file_annotations(self) -> bool:
        return self.get_declaring_class_name() is None

    def get_pretty_name(self) -> str:
        class_name = self.get_declaring_class_name()
        if class_name is None:
            return self.get_name()
        return f"{class_name}::{self.get_name()}"
