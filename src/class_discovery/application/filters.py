"""
Filter pipeline for discovered classes.

Each category holds one predicate. Predicates OR over the arguments they
were built with; the pipeline ANDs across categories.
"""

from collections.abc import Callable, Iterable
from typing import Any

from class_discovery.domain.models import IDENTIFIER_DELIMITER, TypeDescriptor, qualified_name

FilterPredicate = Callable[[TypeDescriptor], bool]

CLASSES = "classes"
METHODS = "methods"
PROPERTIES = "properties"
TRAITS = "traits"
ATTRIBUTES = "attributes"


def _as_names(values: Iterable[Any]) -> frozenset[str]:
    """Normalise classes and dotted names to a set of dotted names."""
    return frozenset(qualified_name(v) if isinstance(v, type) else str(v) for v in values)


def _short(name: str) -> str:
    return name.rpartition(IDENTIFIER_DELIMITER)[2]


def instances_of(*types: type | str) -> FilterPredicate:
    """Match the given classes themselves and anything inheriting from them."""
    wanted = _as_names(types)

    def predicate(descriptor: TypeDescriptor) -> bool:
        if descriptor.identifier in wanted or descriptor.name in wanted:
            return True
        return not wanted.isdisjoint(descriptor.supertypes)

    return predicate


def with_method(*methods: str) -> FilterPredicate:
    """Match classes exposing at least one of the public methods."""
    wanted = frozenset(methods)
    return lambda descriptor: not wanted.isdisjoint(descriptor.method_names)


def with_property(*properties: str) -> FilterPredicate:
    """Match classes exposing at least one of the public fields."""
    wanted = frozenset(properties)
    return lambda descriptor: not wanted.isdisjoint(descriptor.field_names)


def with_trait(*mixins: type | str) -> FilterPredicate:
    """
    Match classes composing at least one of the mixins.

    Class arguments match by qualified name; string arguments also match the
    mixin's bare class name.
    """
    classes = _as_names(m for m in mixins if isinstance(m, type))
    names = frozenset(m for m in mixins if not isinstance(m, type))

    def predicate(descriptor: TypeDescriptor) -> bool:
        if not classes.isdisjoint(descriptor.mixin_names):
            return True
        if not names:
            return False
        candidates = set(descriptor.mixin_names)
        candidates.update(_short(name) for name in descriptor.mixin_names)
        return not names.isdisjoint(candidates)

    return predicate


def with_attribute(*attributes: type | str) -> FilterPredicate:
    """Match classes declaring at least one of the class-level attributes."""
    wanted = _as_names(attributes)
    return lambda descriptor: not wanted.isdisjoint(descriptor.attribute_names)


class FilterPipeline:
    """
    Ordered category -> predicate mapping.

    Registering a category again replaces its predicate and keeps its
    original position.
    """

    def __init__(self) -> None:
        self._filters: dict[str, FilterPredicate] = {}

    def register(self, category: str, predicate: FilterPredicate) -> None:
        self._filters[category] = predicate

    def evaluate(self, descriptor: TypeDescriptor) -> bool:
        """True when every registered category accepts the descriptor."""
        return all(predicate(descriptor) for predicate in self._filters.values())

    def categories(self) -> list[str]:
        return list(self._filters)

    def copy(self) -> "FilterPipeline":
        clone = FilterPipeline()
        clone._filters = dict(self._filters)
        return clone

    def __len__(self) -> int:
        return len(self._filters)
