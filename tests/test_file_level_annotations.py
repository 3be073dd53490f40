"""Tests for the selection of inherited file-level annotations."""

from docreflect.file_level_annotations import file_level_annotations


def test_only_file_scope_tags_are_inherited() -> None:
    """Verify that tags other than the five file-scope ones are ignored."""
    inherited = file_level_annotations(
        {},
        {
            "package": ["App"],
            "subpackage": ["Core"],
            "author": ["Jane"],
            "license": ["MIT"],
            "copyright": ["2024 Acme"],
            "version": ["1.0"],
            "see": ["Foo"],
        },
    )
    assert set(inherited) == {
        "package",
        "subpackage",
        "author",
        "license",
        "copyright",
    }


def test_own_values_take_precedence() -> None:
    """Verify that an element's own non-empty value blocks inheritance."""
    inherited = file_level_annotations(
        {"license": ["GPL"], "author": []},
        {"license": ["MIT"], "author": ["Jane"]},
    )
    assert inherited == {"author": ["Jane"]}


def test_file_names_are_case_folded() -> None:
    """Verify that file annotation names are matched ignoring case."""
    inherited = file_level_annotations({}, {"License": "MIT", "AUTHOR": ""})
    assert inherited == {"license": ["MIT"]}
