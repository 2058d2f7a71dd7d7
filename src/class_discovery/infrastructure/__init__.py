"""Default collaborators backed by the filesystem and importlib."""

from class_discovery.infrastructure.type_registry import ImportlibTypeRegistry, describe_class
from class_discovery.infrastructure.walker import FileSystemWalker

__all__ = [
    "FileSystemWalker",
    "ImportlibTypeRegistry",
    "describe_class",
]
