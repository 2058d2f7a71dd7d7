"""
Class discoverer.

Orchestrates candidate enumeration, identifier translation, type resolution
and filtering.
"""

from __future__ import annotations

import copy
import dataclasses
import os
from collections.abc import Iterator

from class_discovery.application import filters
from class_discovery.application.enumerator import enumerate_candidates
from class_discovery.application.filters import FilterPipeline
from class_discovery.application.results import DiscoveredTypes
from class_discovery.application.translator import translate
from class_discovery.domain.models import (
    IDENTIFIER_DELIMITER,
    DiscoveryRequest,
    namespace_from_path,
    ucfirst,
)
from class_discovery.domain.ports import DirectoryWalker, TypeRegistry
from class_discovery.infrastructure.type_registry import ImportlibTypeRegistry
from class_discovery.infrastructure.walker import FileSystemWalker
from class_discovery.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class Discoverer:
    """
    Finds instantiable classes under a source tree.

    Configuration methods mutate the discoverer and return it, so calls
    chain. A Discoverer is not safe to configure from several threads at
    once; use copy() to hand each caller its own.

    Examples:
        >>> discoverer = Discoverer("/srv/project", "app", "App")
        >>> discoverer.in_("Listeners").with_method("handle").classes()
        DiscoveredTypes(['App.Listeners.SendWelcomeMail'])
    """

    def __init__(
        self,
        root: str,
        path: str = "",
        namespace: str = "",
        walker: DirectoryWalker | None = None,
        registry: TypeRegistry | None = None,
    ) -> None:
        """
        Initialize the discoverer.

        Args:
            root: Absolute base directory
            path: Directory under root holding the source tree
            namespace: Identifier prefix corresponding to ``path``
            walker: Directory walker (defaults to the local filesystem)
            registry: Type registry (defaults to importing modules)
        """
        self.request = DiscoveryRequest(root=root, path=path, namespace=namespace)
        self.filters = FilterPipeline()
        self.walker: DirectoryWalker = walker or FileSystemWalker()
        self.registry: TypeRegistry = registry or ImportlibTypeRegistry()

    def recursively(self) -> Discoverer:
        """Also scan every subdirectory."""
        self.request.recursive = True
        return self

    def at(self, path: str, namespace: str | None = None) -> Discoverer:
        """
        Point discovery at another directory under root.

        Args:
            path: Directory relative to root
            namespace: Identifier prefix for ``path`` (derived from it if omitted)
        """
        self.request.path = path.strip(os.sep)

        if not namespace:
            namespace = namespace_from_path(path)

        self.request.namespace = namespace.strip(IDENTIFIER_DELIMITER)
        return self

    def in_(self, namespace: str) -> Discoverer:
        """Restrict discovery to a sub-namespace such as ``Events`` or ``Events.Bar``."""
        trimmed = namespace.strip("./\\")
        directory = trimmed.replace(IDENTIFIER_DELIMITER, os.sep).replace("\\", os.sep).replace("/", os.sep)
        self.request.directory = ucfirst(directory)
        return self

    def instances_of(self, *types: type | str) -> Discoverer:
        """Keep classes that are, or inherit from, any of ``types``."""
        self.filters.register(filters.CLASSES, filters.instances_of(*types))
        return self

    def with_method(self, *methods: str) -> Discoverer:
        """Keep classes exposing at least one of the public methods."""
        self.filters.register(filters.METHODS, filters.with_method(*methods))
        return self

    def with_property(self, *properties: str) -> Discoverer:
        """Keep classes exposing at least one of the public fields."""
        self.filters.register(filters.PROPERTIES, filters.with_property(*properties))
        return self

    def with_trait(self, *mixins: type | str) -> Discoverer:
        """Keep classes composing at least one of the mixins."""
        self.filters.register(filters.TRAITS, filters.with_trait(*mixins))
        return self

    def with_attribute(self, *attributes: type | str) -> Discoverer:
        """Keep classes declaring at least one of the class-level attributes."""
        self.filters.register(filters.ATTRIBUTES, filters.with_attribute(*attributes))
        return self

    def classes(self) -> DiscoveredTypes:
        """
        Discover classes with the current configuration.

        Returns:
            DiscoveredTypes keyed by identifier, in enumeration order

        Raises:
            PathTranslationError: If the walker yields a file outside root
            OSError: If the scan directory cannot be walked
        """
        return self._discover(self.request)

    def all_classes(self) -> DiscoveredTypes:
        """Discover classes in the whole subtree without changing the configuration."""
        return self._discover(dataclasses.replace(self.request, recursive=True))

    def copy(self) -> Discoverer:
        """Independent discoverer with the same configuration and collaborators."""
        clone = copy.copy(self)
        clone.request = dataclasses.replace(self.request)
        clone.filters = self.filters.copy()
        return clone

    def _discover(self, request: DiscoveryRequest) -> DiscoveredTypes:
        logger.debug(
            "discovery_started",
            directory=request.scan_directory,
            recursive=request.recursive,
            filters=self.filters.categories(),
        )

        found = []

        for candidate in enumerate_candidates(request, self.walker):
            identifier = translate(request, candidate)
            descriptor = self.registry.describe(identifier)

            if descriptor is None:
                logger.debug("candidate_unresolved", identifier=identifier, path=str(candidate))
                continue

            if not descriptor.is_instantiable:
                logger.debug("candidate_not_instantiable", identifier=identifier)
                continue

            if not self.filters.evaluate(descriptor):
                logger.debug("candidate_filtered", identifier=identifier)
                continue

            found.append((identifier, descriptor))

        result = DiscoveredTypes(found)
        logger.info("discovery_complete", directory=request.scan_directory, count=len(result))
        return result

    def __iter__(self) -> Iterator[str]:
        return iter(self.classes())
