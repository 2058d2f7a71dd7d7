"""Shared test fixtures for the class discovery test suite."""

import importlib
import os
import sys
import textwrap
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

import pytest

from class_discovery.domain.models import TypeDescriptor

PACKAGE_PLACEHOLDER = "__PKG__"


@dataclass
class SourceTree:
    """An importable source tree written under tmp_path."""

    root: Path
    package: str
    write: Callable[[str, str], Path]

    def path(self, relative: str = "") -> Path:
        return self.root / self.package / relative

    def identifier(self, dotted: str) -> str:
        return f"{self.package}.{dotted}"

    def load(self, dotted: str) -> type:
        """Import the class a module-per-class identifier names."""
        module = importlib.import_module(self.identifier(dotted))
        return getattr(module, dotted.rpartition(".")[2])


@pytest.fixture
def source_tree(tmp_path, monkeypatch):
    """
    Empty importable source tree.

    Every test gets its own top-level package name so modules cached in
    sys.modules never leak between tests.
    """
    package = f"Shop{uuid.uuid4().hex[:8]}"

    def write(relative: str, code: str = "") -> Path:
        file_path = tmp_path / package / relative
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(textwrap.dedent(code).replace(PACKAGE_PLACEHOLDER, package))
        importlib.invalidate_caches()
        return file_path

    monkeypatch.syspath_prepend(str(tmp_path))
    yield SourceTree(root=tmp_path, package=package, write=write)

    for name in list(sys.modules):
        if name == package or name.startswith(package + "."):
            del sys.modules[name]


@pytest.fixture
def events_tree(source_tree):
    """
    Source tree with an ``Events`` namespace.

    Events/
        AbstractHandler.py   abstract class
        AttributeClass.py    declares the MockClass attribute
        Bar.py               no class
        Baz/Deep/Cougar.py   extends Quz
        Baz/Quz.py           uses LoggingMixin, has public_string
        Foo.py               implements TestInterface, has handle()
        LoggingMixin.py      mixin
        TestInterface.py     abstract interface
        empty.py             empty module
    """
    source_tree.write(
        "Events/TestInterface.py",
        """
        from abc import ABC, abstractmethod


        class TestInterface(ABC):
            @abstractmethod
            def handle(self, event):
                ...
        """,
    )
    source_tree.write(
        "Events/Foo.py",
        """
        from __PKG__.Events.TestInterface import TestInterface


        class Foo(TestInterface):
            def handle(self, event):
                return event

            def _protected_function(self):
                pass

            def __private_function(self):
                pass
        """,
    )
    source_tree.write("Events/Bar.py", "VALUE = 1\n")
    source_tree.write("Events/empty.py", "")
    source_tree.write(
        "Events/AbstractHandler.py",
        """
        from abc import ABC, abstractmethod


        class AbstractHandler(ABC):
            @abstractmethod
            def run(self):
                ...
        """,
    )
    source_tree.write(
        "Events/LoggingMixin.py",
        """
        class LoggingMixin:
            def log(self, message):
                return message
        """,
    )
    source_tree.write(
        "Events/Baz/Quz.py",
        """
        from __PKG__.Events.LoggingMixin import LoggingMixin


        class Quz(LoggingMixin):
            public_string: str = "public"
            _protected_string: str = "protected"
        """,
    )
    source_tree.write(
        "Events/Baz/Deep/Cougar.py",
        """
        from __PKG__.Events.Baz.Quz import Quz


        class Cougar(Quz):
            pass
        """,
    )
    source_tree.write(
        "Events/AttributeClass.py",
        """
        from class_discovery import attributes


        @attributes("MockClass")
        class AttributeClass:
            pass
        """,
    )
    return source_tree


class StubWalker:
    """DirectoryWalker returning a fixed list of paths and recording calls."""

    def __init__(self, paths: list[str]):
        self.paths = [path.replace("/", os.sep) for path in paths]
        self.calls: list[tuple[str, str, int | None]] = []

    def walk(self, directory, pattern, max_depth=None):
        self.calls.append((str(directory), pattern, max_depth))
        return iter(Path(path) for path in self.paths)


class StubRegistry:
    """TypeRegistry answering from a dict of identifier -> descriptor."""

    def __init__(self, descriptors: dict[str, TypeDescriptor]):
        self.descriptors = descriptors
        self.described: list[str] = []

    def describe(self, identifier):
        self.described.append(identifier)
        return self.descriptors.get(identifier)


def make_descriptor(identifier: str, **facts) -> TypeDescriptor:
    """Descriptor with a placeholder type for pure unit tests."""
    facts.setdefault("type", type(identifier.rpartition(".")[2], (), {}))
    facts.setdefault("name", identifier)
    for key in ("supertypes", "method_names", "field_names", "mixin_names", "attribute_names"):
        facts[key] = frozenset(facts.get(key, ()))
    return TypeDescriptor(identifier=identifier, **facts)


@pytest.fixture
def stub_walker():
    return StubWalker


@pytest.fixture
def stub_registry():
    return StubRegistry


@pytest.fixture
def descriptor_factory():
    return make_descriptor
