"""
Core error definitions for the service container

Provides error codes and the exception taxonomy raised while resolving services.
"""

from enum import Enum
from typing import Dict, List, Optional


class ErrorCode(Enum):
    """Standardized error codes for container failures."""

    SERVICE_NOT_FOUND = "SERVICE_NOT_FOUND"
    NOT_INSTANTIABLE = "NOT_INSTANTIABLE"
    UNRESOLVABLE_ARGUMENT = "UNRESOLVABLE_ARGUMENT"
    CIRCULAR_DEPENDENCY = "CIRCULAR_DEPENDENCY"


class ContainerError(Exception):
    """Base exception for errors raised by the service container."""

    def __init__(self, code: ErrorCode, message: str, details: Optional[Dict] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFoundError(ContainerError):
    """Raised when a name has no entry and cannot be autowired."""

    def __init__(self, name: str):
        super().__init__(
            ErrorCode.SERVICE_NOT_FOUND,
            f"Class {name} does not exist",
            {'name': name}
        )
        self.name = name


class NotInstantiableError(ContainerError):
    """Raised when the requested class is abstract or a protocol."""

    def __init__(self, name: str):
        super().__init__(
            ErrorCode.NOT_INSTANTIABLE,
            f"Class {name} is not instantiable",
            {'name': name}
        )
        self.name = name


class UnresolvableArgumentError(ContainerError):
    """Raised when a constructor parameter has no class annotation to resolve."""

    def __init__(self, class_name: str, position: int, parameter: str):
        super().__init__(
            ErrorCode.UNRESOLVABLE_ARGUMENT,
            f"Argument {position} ('{parameter}') in class {class_name} cannot be autowired",
            {'class_name': class_name, 'position': position, 'parameter': parameter}
        )
        self.class_name = class_name
        self.position = position
        self.parameter = parameter


class CircularDependencyError(ContainerError):
    """Raised when circular dependency is detected"""

    def __init__(self, chain: List[str]):
        super().__init__(
            ErrorCode.CIRCULAR_DEPENDENCY,
            f"Circular dependency detected: {' -> '.join(chain)}",
            {'chain': list(chain)}
        )
        self.chain = list(chain)
