"""
Runtime type introspection used by autowiring.

Classes are addressed by their dotted name ("package.module.ClassName"). The
helpers here locate a class from such a name, decide whether it can be
constructed, and describe its constructor parameters.
"""

import importlib
import inspect
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, get_origin, get_type_hints

# Annotations from these modules never name an autowirable service
_UNRESOLVABLE_MODULES = frozenset({'builtins', 'typing', 'types', 'collections.abc'})


@dataclass(frozen=True)
class ConstructorParameter:
    """A single constructor parameter and the class it should be resolved to."""
    position: int
    name: str
    keyword_only: bool
    dependency: Optional[type]


def type_name(cls: type) -> str:
    """Return the dotted name a class is registered and located under."""
    return f"{cls.__module__}.{cls.__qualname__}"


def _import_longest_module(parts: List[str]):
    for index in range(len(parts), 0, -1):
        module_name = '.'.join(parts[:index])
        try:
            return importlib.import_module(module_name), parts[index:]
        except ModuleNotFoundError as e:
            # Only a missing prefix of the requested name means "keep looking"
            if e.name is None or not (module_name == e.name or module_name.startswith(e.name + '.')):
                raise
    return None, parts


def locate_type(name: str) -> Optional[type]:
    """
    Find a class by its dotted name.

    Args:
        name: Dotted path such as "package.module.Outer.Inner"

    Returns:
        The class, or None if nothing importable by that name is a class
    """
    parts = name.split('.')
    if not name or any(not part for part in parts):
        return None

    target, remaining = _import_longest_module(parts)
    if target is None:
        return None

    for attribute in remaining:
        target = getattr(target, attribute, None)
        if target is None:
            return None

    return target if inspect.isclass(target) else None


def is_instantiable(cls: type) -> bool:
    """Check whether a class can be constructed directly."""
    if inspect.isabstract(cls):
        return False
    if getattr(cls, '_is_protocol', False):
        return False
    return True


def _is_service_class(annotation: Any) -> bool:
    if annotation is inspect.Parameter.empty:
        return False
    if not inspect.isclass(annotation) or get_origin(annotation) is not None:
        return False
    return annotation.__module__ not in _UNRESOLVABLE_MODULES


def _constructor_hints(cls: type) -> Dict[str, Any]:
    initializer = cls.__init__ if cls.__init__ is not object.__init__ else cls.__new__
    try:
        return get_type_hints(initializer)
    except (NameError, TypeError):
        # Unresolvable forward references; fall back to the raw annotations
        return {}


def constructor_dependencies(cls: type) -> List[ConstructorParameter]:
    """
    Describe the constructor parameters of a class in declaration order.

    *args and **kwargs are skipped but still count towards `position`, which
    is the index in the full signature. A parameter whose annotation does not
    name a service class is reported with dependency=None.

    Raises:
        ValueError, TypeError: If the constructor signature cannot be inspected
    """
    signature = inspect.signature(cls)
    hints = _constructor_hints(cls)

    parameters = []
    for position, param in enumerate(signature.parameters.values()):
        if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            continue

        annotation = hints.get(param.name, param.annotation)
        dependency = annotation if _is_service_class(annotation) else None

        parameters.append(ConstructorParameter(
            position=position,
            name=param.name,
            keyword_only=param.kind == inspect.Parameter.KEYWORD_ONLY,
            dependency=dependency
        ))

    return parameters
