"""Configuration values consulted by the reflection layer."""

from dataclasses import dataclass


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be interpreted."""


@dataclass(frozen=True)
class DocumentationConfig:
    """Settings for one documentation run."""

    main: str = ""  # name prefix of first-party elements, empty = everything
    internal: bool = False  # document elements annotated @internal

    def get_main(self) -> str:
        """Return the configured main project prefix."""
        return self.main

    def is_internal_documented(self) -> bool:
        """Return whether @internal elements are documented."""
        return self.internal
