"""Collaborator interfaces the discovery engine depends on."""

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from class_discovery.domain.models import TypeDescriptor


class DirectoryWalker(Protocol):
    """Yields candidate files below a directory."""

    def walk(self, directory: str | Path, pattern: str, max_depth: int | None = None) -> Iterable[Path]:
        """
        Yield absolute paths of files matching ``pattern``.

        ``max_depth=0`` restricts the walk to the directory's immediate
        children; ``None`` walks the whole subtree.
        """
        ...


class TypeRegistry(Protocol):
    """Resolves type identifiers to structural facts."""

    def describe(self, identifier: str) -> TypeDescriptor | None:
        """
        Describe the class named by ``identifier``.

        Returns None when the identifier does not name a loadable class.
        Any other failure is raised to the caller.
        """
        ...
