"""
Service Container - Dependency Injection Container with autowiring

Maps service names to instances or factories and, when autowiring is enabled,
constructs unregistered classes by resolving their constructor dependencies
through the same container.
"""

import logging
import threading
from typing import Any, Dict, Iterable, List, Optional, Union

from .config_factory import (
    ConfigError, ContainerConfig, DEFAULT_FILTER_CLASS_NAMES, ConfigurationFactory
)
from .entries import Factory, as_entry
from .errors import (
    CircularDependencyError, NotFoundError, NotInstantiableError, UnresolvableArgumentError
)
from .reflection import constructor_dependencies, is_instantiable, locate_type, type_name

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Dependency Injection Container for named services.

    Features:
    - Instances and lazily invoked factories in one registry
    - Factory results memoized on first resolution
    - Autowiring of classes from their constructor annotations
    - Name stripping so abstractions resolve to concrete entries
    - Circular dependency detection
    """

    def __init__(
        self,
        enable_auto_wiring: bool = True,
        filter_class_names: Iterable[str] = tuple(DEFAULT_FILTER_CLASS_NAMES)
    ):
        self._enable_auto_wiring = enable_auto_wiring
        self._filter_class_names: List[str] = list(filter_class_names)
        self._services: Dict[str, Any] = {}
        self._resolving: List[str] = []  # Names being resolved (circular detection)
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, config: ContainerConfig) -> 'ServiceContainer':
        """Create a container from a loaded configuration."""
        return cls(
            enable_auto_wiring=config.enable_auto_wiring,
            filter_class_names=config.filter_class_names
        )

    @property
    def auto_wiring_enabled(self) -> bool:
        return self._enable_auto_wiring

    @property
    def filter_class_names(self) -> List[str]:
        return list(self._filter_class_names)

    def normalize_name(self, name: Union[str, type]) -> str:
        """Strip every configured filter substring from a requested name."""
        if isinstance(name, type):
            name = type_name(name)
        for fragment in self._filter_class_names:
            name = name.replace(fragment, '')
        return name

    def get(self, name: Union[str, type]) -> Any:
        """
        Get a service, invoking its factory or autowiring it if necessary.

        Args:
            name: Service name, or a class whose dotted name is used

        Returns:
            Service instance

        Raises:
            NotFoundError: If nothing is registered and autowiring can't help
            NotInstantiableError: If the autowired class is abstract
            UnresolvableArgumentError: If a constructor parameter can't be autowired
            CircularDependencyError: If resolution re-enters a name in progress
        """
        name = self.normalize_name(name)

        with self._lock:
            if name in self._services:
                service = self._services[name]

                if isinstance(service, Factory):
                    service = self._invoke_factory(name, service)

                return service

            if self._enable_auto_wiring:
                return self._autowire(name)

        raise NotFoundError(name)

    def _enter(self, name: str) -> None:
        if name in self._resolving:
            raise CircularDependencyError(self._resolving[self._resolving.index(name):] + [name])
        self._resolving.append(name)

    def _leave(self, name: str) -> None:
        self._resolving.remove(name)

    def _invoke_factory(self, name: str, factory: Factory) -> Any:
        self._enter(name)
        try:
            logger.debug(f"Invoking factory for: {name}")
            service = factory(self)
        finally:
            self._leave(name)

        # Stored as-is so a callable result is never wrapped as a new factory
        with self._lock:
            self._services[name] = service
        logger.debug(f"Memoized factory result for: {name}")
        return service

    def _autowire(self, name: str) -> Any:
        """
        Instantiate the class named `name` and register the instance under it.
        """
        cls = locate_type(name)
        if cls is None:
            raise NotFoundError(name)

        if not is_instantiable(cls):
            raise NotInstantiableError(name)

        try:
            parameters = constructor_dependencies(cls)
        except (ValueError, TypeError) as e:
            logger.debug(f"Cannot inspect constructor of {name}: {e}")
            raise NotInstantiableError(name) from e

        self._enter(name)
        try:
            args = []
            kwargs = {}
            for param in parameters:
                if param.dependency is None:
                    raise UnresolvableArgumentError(name, param.position, param.name)

                dependency = self.get(type_name(param.dependency))
                if param.keyword_only:
                    kwargs[param.name] = dependency
                else:
                    args.append(dependency)

            service = cls(*args, **kwargs)
        finally:
            self._leave(name)

        logger.debug(f"Autowired {name} with {len(parameters)} dependencies")
        self.set(name, service)
        return service

    def has(self, name: str) -> bool:
        """Check if a service is registered under exactly this name."""
        return name in self._services

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def set(self, name: str, value: Any) -> 'ServiceContainer':
        """
        Register an instance or factory, replacing any existing entry.

        Plain functions, lambdas, bound methods and partials are stored as
        factories and called with the container on first `get`. To register
        such a callable as the service itself, wrap it in a factory that
        returns it: `set(name, Factory(lambda c: handler))`.

        Returns:
            Self for method chaining
        """
        with self._lock:
            self._services[name] = as_entry(value)
        logger.debug(f"Registered service: {name}")
        return self

    def remove(self, name: str) -> None:
        """Remove a service if it is registered."""
        with self._lock:
            if name in self._services:
                del self._services[name]
                logger.debug(f"Removed service: {name}")

    def clear(self) -> 'ServiceContainer':
        """Clear all services (useful for testing)"""
        with self._lock:
            self._services.clear()
        logger.debug("Service container cleared")
        return self

    def get_service_names(self) -> List[str]:
        """Get list of all registered service names"""
        return list(self._services.keys())

    def get_all_services(self) -> Dict[str, str]:
        """Get a dictionary of all registered service names and their types."""
        services = {}
        for name, service in list(self._services.items()):
            if isinstance(service, Factory):
                services[name] = "Not instantiated (factory)"
            else:
                services[name] = type(service).__name__
        return services

    def __repr__(self) -> str:
        return f"ServiceContainer(services={len(self._services)}, auto_wiring={self._enable_auto_wiring})"


# Global container instance for the application
_app_container: Optional[ServiceContainer] = None
_app_container_lock = threading.Lock()


def get_container() -> ServiceContainer:
    """Get the global service container, configuring it from the environment on first use"""
    global _app_container
    if _app_container is None:
        with _app_container_lock:
            if _app_container is None:
                factory = ConfigurationFactory()
                try:
                    config = factory.get_config()
                except ConfigError:
                    config = factory.load_from_environment()
                _app_container = ServiceContainer.from_config(config)
    return _app_container


def reset_container() -> None:
    """Discard the global container (useful for testing)"""
    global _app_container
    with _app_container_lock:
        _app_container = None


def configure_container(
    config: Optional[ContainerConfig] = None,
    services: Optional[Dict[str, Any]] = None
) -> ServiceContainer:
    """
    Configure the global service container.

    Args:
        config: Container configuration; loaded from the environment if omitted
        services: Dictionary of service name -> instance or factory

    Returns:
        Configured service container
    """
    global _app_container
    if config is None:
        config = ConfigurationFactory().load_from_environment()

    container = ServiceContainer.from_config(config)
    for name, service in (services or {}).items():
        container.set(name, service)

    with _app_container_lock:
        _app_container = container

    logger.info(f"Configured service container with {len(services or {})} services")
    return container
