"""
Discovery domain models.

Core values passed between the enumerator, translator, type registry and
filter pipeline.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any

IDENTIFIER_DELIMITER = "."
SOURCE_SUFFIX = ".py"
SOURCE_GLOB = f"*{SOURCE_SUFFIX}"


def ucfirst(text: str) -> str:
    """Upper-case the first character only, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def qualified_name(cls: type) -> str:
    """Dotted ``module.qualname`` of a class."""
    return f"{cls.__module__}{IDENTIFIER_DELIMITER}{cls.__qualname__}"


def namespace_from_path(path: str) -> str:
    """
    Derive an identifier prefix from a relative directory.

    Examples:
        >>> namespace_from_path("app")
        'App'
        >>> namespace_from_path("services/billing/")
        'Services.billing'
    """
    trimmed = path.strip(os.sep)
    return ucfirst(trimmed).replace(os.sep, IDENTIFIER_DELIMITER)


@dataclass
class DiscoveryRequest:
    """
    Where to look for classes and how to name them.

    ``path`` and ``namespace`` travel together: ``path`` is the directory
    under ``root`` whose identifiers start with ``namespace``.
    """

    root: str
    path: str = ""
    namespace: str = ""
    directory: str = ""
    recursive: bool = False

    def __post_init__(self) -> None:
        self.root = str(self.root)
        if not self.root.endswith(os.sep):
            self.root += os.sep
        self.path = self.path.strip(os.sep)
        self.namespace = self.namespace.strip(IDENTIFIER_DELIMITER)

    @property
    def scan_directory(self) -> str:
        """Directory handed to the walker."""
        parts = [part for part in (self.path, self.directory) if part]
        return os.path.join(self.root, *parts)


@dataclass(frozen=True)
class TypeDescriptor:
    """
    Structural facts about one resolved class.

    ``type`` is the class object itself; the name sets are what the filter
    pipeline matches against.
    """

    identifier: str
    type: Any
    name: str
    is_instantiable: bool = True
    supertypes: frozenset[str] = field(default_factory=frozenset)
    method_names: frozenset[str] = field(default_factory=frozenset)
    field_names: frozenset[str] = field(default_factory=frozenset)
    mixin_names: frozenset[str] = field(default_factory=frozenset)
    attribute_names: frozenset[str] = field(default_factory=frozenset)

    @property
    def short_name(self) -> str:
        """Class name without its module."""
        return self.name.rpartition(IDENTIFIER_DELIMITER)[2]
