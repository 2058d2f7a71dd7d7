"""
Class-level attributes.

Python has no declarative class attributes, so classes opt in with a
decorator that records markers on the class itself:

    class Listener(TypeAttribute):
        def __init__(self, event: str):
            self.event = event

    @Listener("user.created")
    class SendWelcomeMail:
        ...

    @attributes("MockClass")
    class Fixture:
        ...

Markers are not inherited: a subclass declares its own or has none.
"""

from __future__ import annotations

from typing import Any, TypeVar

ATTRIBUTES_DUNDER = "__type_attributes__"

T = TypeVar("T", bound=type)


def _declare(cls: T, *markers: Any) -> T:
    declared = cls.__dict__.get(ATTRIBUTES_DUNDER, ())
    setattr(cls, ATTRIBUTES_DUNDER, (*declared, *markers))
    return cls


class TypeAttribute:
    """Base class for attributes applied to classes as decorators."""

    def __call__(self, cls: T) -> T:
        return _declare(cls, self)


def attributes(*names: str):
    """Declare plain named attributes on a class."""

    def decorator(cls: T) -> T:
        return _declare(cls, *names)

    return decorator


def declared_attributes(cls: type) -> tuple[Any, ...]:
    """Markers declared directly on ``cls``."""
    return tuple(cls.__dict__.get(ATTRIBUTES_DUNDER, ()))
