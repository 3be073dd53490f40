"""Run-scoped registry of canonical namespace spellings."""

import logging
import threading

logger = logging.getLogger(__name__)


class NamespaceRegistry:
    """Maps namespace names, ignoring case, to the first spelling seen.

    One registry lives for one documentation run. Entries are never evicted.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self.namespaces: dict[str, str] = {}  # lower name -> display name
        self._lock = threading.Lock()

    def canonical(self, name: str) -> str:
        """Return the canonical spelling of a namespace, registering it if new."""
        if not name:
            return ""
        key = name.lower()
        with self._lock:
            known = self.namespaces.get(key)
            if known is None:
                self.namespaces[key] = name
                return name
        if known != name:
            logger.debug("Namespace %s normalized to %s", name, known)
        return known

    def __len__(self) -> int:
        return len(self.namespaces)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self.namespaces
