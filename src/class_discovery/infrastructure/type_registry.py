"""
Runtime type registry backed by importlib.

Resolves dotted identifiers using the one-class-per-module convention: the
identifier ``App.Events.Foo`` names the module ``App.Events.Foo`` and the
class ``Foo`` defined in it.
"""

import importlib
import inspect
from typing import Any

from class_discovery.domain.attributes import TypeAttribute, declared_attributes
from class_discovery.domain.models import IDENTIFIER_DELIMITER, TypeDescriptor, qualified_name
from class_discovery.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


def type_names(cls: type) -> set[str]:
    """
    Every dotted name a class can be referred to by.

    A class defined in a module named after it (``App.Events.Foo.Foo``) is
    also known by its module path (``App.Events.Foo``), which is how
    discovery identifiers name it.
    """
    names = {qualified_name(cls)}
    module = cls.__module__
    if module == cls.__qualname__ or module.endswith(IDENTIFIER_DELIMITER + cls.__qualname__):
        names.add(module)
    return names


def is_mixin(cls: type) -> bool:
    """Classes named *Mixin or flagged with ``__mixin__ = True`` are mixins."""
    return bool(cls.__dict__.get("__mixin__", False)) or cls.__name__.endswith("Mixin")


def is_instantiable(cls: type) -> bool:
    """Abstract classes, protocols and mixins are never instantiable."""
    if inspect.isabstract(cls):
        return False
    if cls.__dict__.get("_is_protocol", False):
        return False
    return not is_mixin(cls)


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _members(cls: type) -> tuple[set[str], set[str]]:
    """Split public class members into (methods, fields)."""
    methods: set[str] = set()
    fields: set[str] = set()

    for name in dir(cls):
        if not _is_public(name):
            continue

        try:
            raw = inspect.getattr_static(cls, name)
        except AttributeError:
            continue

        if isinstance(raw, property):
            fields.add(name)
        elif isinstance(raw, (staticmethod, classmethod)) or inspect.isroutine(raw):
            methods.add(name)
        elif not isinstance(raw, type):
            fields.add(name)

    # Annotated attributes without a default never show up in dir()
    for klass in cls.__mro__:
        if klass is object:
            continue
        fields.update(name for name in inspect.get_annotations(klass) if _is_public(name))

    return methods, fields - methods


def _mixins(cls: type) -> set[str]:
    """
    Classes composed in beside the primary inheritance line.

    The primary line is the chain of first bases; everything else in the MRO
    came in as a mixin, directly or through another mixin. Declared mixins
    count wherever they sit.
    """
    primary = set()
    klass: type | None = cls
    while klass is not None:
        primary.add(klass)
        klass = klass.__bases__[0] if klass.__bases__ else None

    names: set[str] = set()
    for klass in cls.__mro__:
        if klass is cls or klass is object:
            continue
        if klass in primary and not is_mixin(klass):
            continue
        names.update(type_names(klass))
    return names


def _attribute_names(cls: type) -> set[str]:
    names: set[str] = set()
    for marker in declared_attributes(cls):
        if isinstance(marker, str):
            names.add(marker)
        elif isinstance(marker, TypeAttribute):
            names.add(type(marker).__name__)
            names.add(qualified_name(type(marker)))
    return names


def describe_class(cls: type, identifier: str | None = None) -> TypeDescriptor:
    """
    Build the structural descriptor of a class.

    Args:
        cls: Class to describe
        identifier: Discovery identifier (defaults to the class's own name)

    Returns:
        TypeDescriptor for ``cls``
    """
    methods, fields = _members(cls)
    supertypes: set[str] = set()
    for klass in cls.__mro__[1:]:
        if klass is not object:
            supertypes.update(type_names(klass))

    return TypeDescriptor(
        identifier=identifier or qualified_name(cls),
        type=cls,
        name=qualified_name(cls),
        is_instantiable=is_instantiable(cls),
        supertypes=frozenset(supertypes),
        method_names=frozenset(methods),
        field_names=frozenset(fields),
        mixin_names=frozenset(_mixins(cls)),
        attribute_names=frozenset(_attribute_names(cls)),
    )


class ImportlibTypeRegistry:
    """
    TypeRegistry that imports modules to resolve identifiers.

    Missing modules, missing classes and source files that do not parse are
    reported as None. Errors raised by the module's own code while importing
    propagate unchanged.
    """

    def describe(self, identifier: str) -> TypeDescriptor | None:
        parts = identifier.split(IDENTIFIER_DELIMITER)
        class_name = parts[-1]

        if not all(part.isidentifier() for part in parts) or not _is_public(class_name):
            return None

        try:
            module = importlib.import_module(identifier)
        except ModuleNotFoundError as e:
            if not self._names_identifier(e.name, identifier):
                raise
            logger.debug("module_not_found", identifier=identifier, module=e.name)
            return None
        except SyntaxError as e:
            logger.debug("module_malformed", identifier=identifier, error=str(e), lineno=e.lineno)
            return None

        cls: Any = getattr(module, class_name, None)
        if not isinstance(cls, type):
            logger.debug("class_not_found", identifier=identifier, module=module.__name__)
            return None

        return describe_class(cls, identifier)

    @staticmethod
    def _names_identifier(missing: str | None, identifier: str) -> bool:
        """Whether the missing module is the identifier itself or one of its packages."""
        if missing is None:
            return False
        return missing == identifier or identifier.startswith(missing + IDENTIFIER_DELIMITER)
