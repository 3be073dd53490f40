"""Facade for reflected free functions."""

from docreflect.element_reflection import ElementReflection


class FunctionReflection(ElementReflection):
    """A function declared outside any class."""

    def inherits_file_annotations(self) -> bool:
        return True

    def get_pretty_name(self) -> str:
        return f"{self.get_name()}()"
