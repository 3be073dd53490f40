"""Facade for reflected class properties."""

from docreflect.element_reflection import ElementReflection
from docreflect.in_class import InClassMixin


class PropertyReflection(InClassMixin, ElementReflection):
    """A property; its short description may come from @var."""

    has_var_fallback = True

    def get_pretty_name(self) -> str:
        return f"{self.get_declaring_class_name()}::${self.get_name()}"
