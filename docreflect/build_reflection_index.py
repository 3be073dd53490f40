"""Logic for building a reflection index from dump files."""

import logging
from pathlib import Path
from typing import Any

from docreflect.element_kind import ElementKind
from docreflect.load_reflection_dump import load_reflection_dump
from docreflect.raw_item import RawExtensionItem, RawFile, RawItem, ReflectionIndex

logger = logging.getLogger(__name__)


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _as_str_map(value: Any) -> dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {str(k): str(v) for k, v in value.items()}


def _as_annotations(value: Any) -> dict[str, Any]:
    return {str(k): v for k, v in value.items()} if isinstance(value, dict) else {}


def _build_item(it: dict[str, Any], file: RawFile | None) -> RawItem:
    name = str(it.get("name") or "")
    declaring_class = it.get("declaring_class")
    extension = it.get("extension")
    return RawItem(
        kind=ElementKind.parse(str(it.get("kind") or "")),
        name=name,
        file=file,
        namespace=str(it.get("namespace") or ""),
        namespace_aliases=_as_str_map(it.get("namespace_aliases")),
        doc_comment=it.get("doc_comment"),
        annotations=_as_annotations(it.get("annotations")),
        declaring_class=str(declaring_class) if declaring_class else None,
        extension=str(extension) if extension else None,
        start_position=_as_int(it.get("start_position")),
        end_position=_as_int(it.get("end_position")),
        start_line=_as_int(it.get("start_line")),
        end_line=_as_int(it.get("end_line")),
        internal=bool(it.get("internal", file is None)),
        tokenized=bool(it.get("tokenized", file is not None)),
        deprecated=bool(it.get("deprecated", False)),
    )


def _add_items(
    index: ReflectionIndex, items: Any, file: RawFile | None, source: Path
) -> None:
    for it in items or []:
        if not isinstance(it, dict) or not it.get("name"):
            logger.warning("Skipping element without a name in %s", source)
            continue
        index.add_item(_build_item(it, file))


def build_reflection_index(dump_files: list[Path]) -> ReflectionIndex:
    """Index all reflection dumps into one set of raw reflections."""
    index = ReflectionIndex()
    for f in dump_files:
        doc = load_reflection_dump(f)
        for ext in doc.get("extensions") or []:
            if isinstance(ext, dict) and ext.get("name"):
                index.add_extension(RawExtensionItem(name=str(ext["name"])))
        for file_doc in doc.get("files") or []:
            if not isinstance(file_doc, dict):
                continue
            raw_file = RawFile(
                name=str(file_doc.get("name") or f),
                annotations=_as_annotations(file_doc.get("annotations")),
            )
            index.files.append(raw_file)
            _add_items(index, file_doc.get("elements"), raw_file, f)
        # Built-in definitions have no source file.
        _add_items(index, doc.get("elements"), None, f)
        logger.debug("Indexed %s: %d element(s) so far", f, len(index))
    return index
