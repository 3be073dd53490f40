"""Tests for the reflection factory."""

import threading
from dataclasses import dataclass

import pytest

from docreflect.class_reflection import ClassReflection
from docreflect.constant_reflection import ConstantReflection
from docreflect.documentation_config import DocumentationConfig
from docreflect.element_kind import ElementKind
from docreflect.extension_reflection import ExtensionReflection
from docreflect.function_reflection import FunctionReflection
from docreflect.method_reflection import MethodReflection
from docreflect.namespace_registry import NamespaceRegistry
from docreflect.property_reflection import PropertyReflection
from docreflect.raw_item import RawExtensionItem, RawItem
from docreflect.reflection_factory import ReflectionFactory, UnsupportedReflectionError


@dataclass
class MockReflection:
    """Minimal raw reflection reporting its kind as text."""

    kind: str
    name: str = "Mock"

    def get_kind(self) -> str:
        """Return the kind as the parser spelled it."""
        return self.kind

    def get_name(self) -> str:
        """Return the element name."""
        return self.name


def test_variant_per_kind() -> None:
    """Verify that each kind is wrapped in its own facade type."""
    factory = ReflectionFactory(DocumentationConfig())
    expected = {
        ElementKind.CLASS: ClassReflection,
        ElementKind.FUNCTION: FunctionReflection,
        ElementKind.METHOD: MethodReflection,
        ElementKind.PROPERTY: PropertyReflection,
        ElementKind.CONSTANT: ConstantReflection,
    }
    for kind, facade_type in expected.items():
        facade = factory.create_from_reflection(RawItem(kind=kind, name="X"))
        assert type(facade) is facade_type
    extension = factory.create_from_reflection(RawExtensionItem(name="Core"))
    assert isinstance(extension, ExtensionReflection)


def test_kind_as_text() -> None:
    """Verify that textual kinds are accepted ignoring case."""
    factory = ReflectionFactory(DocumentationConfig())
    assert isinstance(
        factory.create_from_reflection(MockReflection(kind=" Class ")),
        ClassReflection,
    )


def test_identity_is_preserved() -> None:
    """Verify that wrapping the same raw object twice returns one facade."""
    factory = ReflectionFactory(DocumentationConfig())
    raw = RawItem(kind=ElementKind.CLASS, name="A")
    first = factory.create_from_reflection(raw)
    first.add_annotation("uses", "B")
    second = factory.create_from_reflection(raw)
    assert second is first
    assert second.get_annotation("uses") == ["B"]
    assert len(factory) == 1


def test_distinct_raw_objects_get_distinct_facades() -> None:
    """Verify that equal-looking raw objects are not merged."""
    factory = ReflectionFactory(DocumentationConfig())
    a = factory.create_from_reflection(RawItem(kind=ElementKind.CLASS, name="A"))
    b = factory.create_from_reflection(RawItem(kind=ElementKind.CLASS, name="A"))
    assert a is not b


def test_unsupported_kind() -> None:
    """Verify that unknown kinds are rejected."""
    factory = ReflectionFactory(DocumentationConfig())
    with pytest.raises(UnsupportedReflectionError):
        factory.create_from_reflection(MockReflection(kind="macro"))
    with pytest.raises(TypeError):
        factory.create_from_reflection(object())


def test_shared_namespace_registry() -> None:
    """Verify that a registry passed in is used by all facades."""
    registry = NamespaceRegistry()
    registry.canonical("Vendor\\Lib")
    factory = ReflectionFactory(DocumentationConfig(), namespaces=registry)
    raw = RawItem(kind=ElementKind.CLASS, name="x", namespace="VENDOR\\LIB")
    assert factory.get_namespace_registry() is registry
    assert factory.create_from_reflection(raw).get_namespace_name() == "Vendor\\Lib"


def test_configuration_is_exposed() -> None:
    """Verify that facades read the factory configuration."""
    config = DocumentationConfig(main="App", internal=True)
    factory = ReflectionFactory(config)
    element = factory.create_from_reflection(RawItem(kind=ElementKind.CLASS, name="A"))
    assert factory.get_configuration() is config
    assert element.configuration is config


def test_concurrent_wrapping_yields_one_facade() -> None:
    """Verify that threads wrapping the same raw object share one facade."""
    factory = ReflectionFactory(DocumentationConfig())
    raw = RawItem(kind=ElementKind.CLASS, name="A")
    barrier = threading.Barrier(16)
    facades: list[object] = []
    lock = threading.Lock()

    def worker() -> None:
        barrier.wait()
        facade = factory.create_from_reflection(raw)
        with lock:
            facades.append(facade)

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(facades) == 16
    assert all(f is facades[0] for f in facades)
    assert len(factory) == 1
