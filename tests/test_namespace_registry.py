"""Tests for the run-scoped namespace registry."""

import threading

from docreflect.namespace_registry import NamespaceRegistry


def test_first_spelling_wins() -> None:
    """Verify that later spellings map to the first one registered."""
    registry = NamespaceRegistry()
    assert registry.canonical("App\\Service") == "App\\Service"
    assert registry.canonical("app\\SERVICE") == "App\\Service"
    assert registry.canonical("APP\\service") == "App\\Service"
    assert len(registry) == 1


def test_empty_name_is_not_registered() -> None:
    """Verify that the empty namespace stays empty."""
    registry = NamespaceRegistry()
    assert registry.canonical("") == ""
    assert len(registry) == 0


def test_contains_ignores_case() -> None:
    """Verify case-insensitive membership."""
    registry = NamespaceRegistry()
    registry.canonical("Vendor")
    assert "vendor" in registry
    assert "Other" not in registry


def test_registries_are_independent() -> None:
    """Verify that two runs do not share spellings."""
    first = NamespaceRegistry()
    second = NamespaceRegistry()
    first.canonical("Foo")
    assert second.canonical("FOO") == "FOO"


def test_concurrent_registration_is_consistent() -> None:
    """Verify that all workers observe a single winner."""
    registry = NamespaceRegistry()
    spellings = ["Ns", "NS", "ns", "nS"] * 25
    results: list[str] = []
    lock = threading.Lock()

    def worker(name: str) -> None:
        value = registry.canonical(name)
        with lock:
            results.append(value)

    threads = [threading.Thread(target=worker, args=(s,)) for s in spellings]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(set(results)) == 1
    assert results[0] in {"Ns", "NS", "ns", "nS"}
