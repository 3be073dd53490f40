"""Logic for loading and merging configuration files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from docreflect.deep_merge import deep_merge
from docreflect.documentation_config import ConfigError, DocumentationConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "main": "",
    "internal": False,
}


def load_config_data(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = DEFAULT_CONFIG.copy()
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                raise ConfigError(f"{p.name} must contain a mapping at the root")
            config = deep_merge(config, user_config)
        else:
            logger.debug("Config file %s not found, using defaults", p)
    return config


def load_config(path: str | None = None) -> DocumentationConfig:
    """Load the documentation configuration for a run."""
    data = load_config_data(path)
    main = data.get("main")
    internal = data.get("internal")
    if internal is not None and not isinstance(internal, bool):
        raise ConfigError(f"'internal' must be a boolean, got {internal!r}")
    return DocumentationConfig(
        main=str(main) if main else "",
        internal=bool(internal),
    )
