"""
Service container package for dependency injection with autowiring.
"""

from .config_factory import (
    ConfigError,
    ConfigurationFactory,
    ContainerConfig,
    get_config,
    load_config,
    load_config_from_dict,
    override_config,
    reset_config,
)
from .container import ServiceContainer, configure_container, get_container, reset_container
from .entries import Factory, is_factory
from .errors import (
    CircularDependencyError,
    ContainerError,
    ErrorCode,
    NotFoundError,
    NotInstantiableError,
    UnresolvableArgumentError,
)

__all__ = [
    'ServiceContainer',
    'get_container',
    'reset_container',
    'configure_container',
    'Factory',
    'is_factory',
    'ContainerConfig',
    'ConfigurationFactory',
    'ConfigError',
    'get_config',
    'load_config',
    'load_config_from_dict',
    'override_config',
    'reset_config',
    'ErrorCode',
    'ContainerError',
    'NotFoundError',
    'NotInstantiableError',
    'UnresolvableArgumentError',
    'CircularDependencyError',
]
