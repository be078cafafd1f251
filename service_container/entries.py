"""
Registry entries for the service container.

A registry value is either a plain instance or a Factory. Plain functions,
lambdas, bound methods and partials handed to the container are treated as
factories; everything else (classes and callable objects included) is stored
as an instance.
"""

import functools
import types
from typing import Any, Callable


class Factory:
    """Deferred construction of a service, invoked with the container on first use."""

    def __init__(self, factory: Callable[[Any], Any]):
        if not callable(factory):
            raise ValueError("Factory must wrap a callable")
        self.factory = factory

    def __call__(self, container: Any) -> Any:
        return self.factory(container)

    def __repr__(self) -> str:
        name = getattr(self.factory, '__qualname__', type(self.factory).__name__)
        return f"Factory({name})"


_FACTORY_TYPES = (types.FunctionType, types.MethodType, functools.partial)


def is_factory(value: Any) -> bool:
    """Check if a value should be invoked rather than returned as-is."""
    return isinstance(value, Factory) or isinstance(value, _FACTORY_TYPES)


def as_entry(value: Any) -> Any:
    """Normalize a value passed to the container into a registry entry."""
    if isinstance(value, Factory):
        return value
    if isinstance(value, _FACTORY_TYPES):
        return Factory(value)
    return value
