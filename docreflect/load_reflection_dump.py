"""Logic for loading reflection dump YAML files."""

from pathlib import Path
from typing import Any

import yaml


def load_reflection_dump(path: Path) -> dict[str, Any]:
    """Load and parse a reflection dump written by the source parser."""
    doc = yaml.safe_load(path.read_text(encoding="utf-8"))
    if doc is not None and not isinstance(doc, dict):
        raise ValueError(f"{path} must contain a mapping at the root")
    return doc or {}
