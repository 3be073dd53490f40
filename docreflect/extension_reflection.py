"""Facade for extensions, the providers of built-in definitions."""

from docreflect.reflection_base import ReflectionBase


class ExtensionReflection(ReflectionBase):
    """A named bundle of built-in classes, functions and constants."""

    def get_file_name(self) -> str | None:
        return None

    def get_start_line(self) -> int:
        return 0

    def get_end_line(self) -> int:
        return 0
