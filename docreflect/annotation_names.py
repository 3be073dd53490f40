"""Reserved annotation names shared by the reflection layer."""

# Markers used by the parser for the prose parts of a doc comment. The leading
# space keeps them apart from any tag a doc comment can declare.
SHORT_DESCRIPTION = " short_description"
LONG_DESCRIPTION = " long_description"

DESCRIPTION_MARKERS = frozenset({SHORT_DESCRIPTION, LONG_DESCRIPTION})

FILE_LEVEL_ANNOTATIONS = ("package", "subpackage", "author", "license", "copyright")

VAR = "var"
INTERNAL = "internal"
IGNORE = "ignore"
