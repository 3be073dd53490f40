"""Facade for reflected classes."""

from docreflect.element_reflection import ElementReflection


class ClassReflection(ElementReflection):
    """A class, interface or trait."""

    def inherits_file_annotations(self) -> bool:
        return True
