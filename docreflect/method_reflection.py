"""Facade for reflected methods."""

from docreflect.element_reflection import ElementReflection
from docreflect.in_class import InClassMixin


class MethodReflection(InClassMixin, ElementReflection):
    """A function declared inside a class."""

    def get_pretty_name(self) -> str:
        return f"{self.get_declaring_class_name()}::{self.get_name()}()"
