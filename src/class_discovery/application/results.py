"""
Discovery results.

An ordered, read-only mapping of identifier -> TypeDescriptor with the small
set of collection helpers callers chain on after discovery.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, TypeVar

from class_discovery.domain.models import TypeDescriptor

T = TypeVar("T")

_MISSING = object()


class DiscoveredTypes(Mapping[str, TypeDescriptor]):
    """
    Classes found by one discovery call, in enumeration order.

    Example:
        >>> handlers = discoverer.in_("Listeners").classes()
        >>> handlers.filter(lambda d, _: "handle" in d.method_names).types()
    """

    def __init__(self, items: Iterable[tuple[str, TypeDescriptor]] = ()) -> None:
        self._items: dict[str, TypeDescriptor] = {}
        for identifier, descriptor in items:
            self._items[identifier] = descriptor

    def __getitem__(self, identifier: str) -> TypeDescriptor:
        return self._items[identifier]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._items)!r})"

    def types(self) -> list[type]:
        """The discovered class objects."""
        return [descriptor.type for descriptor in self._items.values()]

    def map(self, fn: Callable[[TypeDescriptor, str], T]) -> dict[str, T]:
        """Apply ``fn(descriptor, identifier)`` to every entry, keeping keys and order."""
        return {identifier: fn(descriptor, identifier) for identifier, descriptor in self._items.items()}

    def filter(self, fn: Callable[[TypeDescriptor, str], bool]) -> DiscoveredTypes:
        """Keep the entries for which ``fn(descriptor, identifier)`` is true."""
        return DiscoveredTypes(
            (identifier, descriptor)
            for identifier, descriptor in self._items.items()
            if fn(descriptor, identifier)
        )

    def reduce(self, fn: Callable[[Any, TypeDescriptor, str], Any], initial: Any = None) -> Any:
        """Fold entries left to right with ``fn(carry, descriptor, identifier)``."""
        carry = initial
        for identifier, descriptor in self._items.items():
            carry = fn(carry, descriptor, identifier)
        return carry

    def first(self, default: Any = _MISSING) -> TypeDescriptor:
        """First discovered entry; raises LookupError when empty unless a default is given."""
        for descriptor in self._items.values():
            return descriptor
        if default is _MISSING:
            raise LookupError("No classes were discovered")
        return default

    def to_dict(self) -> dict[str, TypeDescriptor]:
        """Plain ordered dict copy of the results."""
        return dict(self._items)
