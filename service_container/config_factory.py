"""
Configuration Factory - Centralized configuration management for the service container
Provides type-safe configuration with validation and environment loading.
"""

import os
import logging
from typing import Any, Dict, List, Optional, Type
from dataclasses import dataclass, field, replace

DEFAULT_FILTER_CLASS_NAMES = ['Interface', 'Abstract']
DEFAULT_ENV_PREFIX = 'SERVICE_CONTAINER_'


class ConfigError(Exception):
    """Configuration-related errors"""
    pass


@dataclass
class ContainerConfig:
    """Container configuration with type safety and validation"""

    # Resolve unregistered names by constructing the class they refer to
    enable_auto_wiring: bool = True

    # Substrings stripped from requested names before lookup
    filter_class_names: List[str] = field(default_factory=lambda: list(DEFAULT_FILTER_CLASS_NAMES))

    def __post_init__(self):
        """Validate configuration after initialization"""
        self._validate()

    def _validate(self):
        """Validate configuration values"""
        if not isinstance(self.enable_auto_wiring, bool):
            raise ConfigError(f"Invalid enable_auto_wiring: {self.enable_auto_wiring!r}")

        if isinstance(self.filter_class_names, str):
            raise ConfigError("filter_class_names must be a sequence of strings, not a string")

        for name in self.filter_class_names:
            if not isinstance(name, str) or not name:
                raise ConfigError(f"Invalid filter class name: {name!r}")


class ConfigurationFactory:
    """
    Factory for creating and managing container configuration.

    Features:
    - Environment variable loading with type conversion
    - Configuration validation
    - Singleton pattern for global config access
    """

    _instance: Optional['ConfigurationFactory'] = None
    _config: Optional[ContainerConfig] = None

    def __new__(cls) -> 'ConfigurationFactory':
        """Singleton pattern implementation"""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize the configuration factory"""
        if not hasattr(self, '_initialized'):
            self._logger = logging.getLogger(__name__)
            self._env_overrides: Dict[str, Any] = {}
            self._initialized = True

    def load_from_environment(self, env_prefix: str = DEFAULT_ENV_PREFIX) -> ContainerConfig:
        """
        Load configuration from environment variables.

        Args:
            env_prefix: Prefix for environment variables (e.g., 'SERVICE_CONTAINER_')

        Returns:
            Configured ContainerConfig instance
        """
        def get_env_var(key: str, default: Any = None, var_type: Type = str) -> Any:
            """Get environment variable with type conversion"""
            env_key = f"{env_prefix}{key}" if env_prefix else key
            value = os.environ.get(env_key)

            if value is None:
                return default

            if var_type == bool:
                return value.strip().lower() in ('true', '1', 'yes', 'on')
            elif var_type == list:
                return [item.strip() for item in value.split(',') if item.strip()]
            else:
                return value

        config = ContainerConfig(
            enable_auto_wiring=get_env_var('ENABLE_AUTO_WIRING', True, bool),
            filter_class_names=get_env_var('FILTER_CLASS_NAMES', list(DEFAULT_FILTER_CLASS_NAMES), list),
        )

        # Apply any manual overrides
        for key, value in self._env_overrides.items():
            if hasattr(config, key):
                setattr(config, key, value)
        config._validate()

        self._config = config
        self._logger.info(
            f"Container configuration loaded: auto_wiring={config.enable_auto_wiring}, "
            f"filters={config.filter_class_names}"
        )
        return config

    def load_from_dict(self, config_dict: Dict[str, Any]) -> ContainerConfig:
        """
        Load configuration from dictionary (useful for testing).

        Args:
            config_dict: Dictionary of configuration values

        Returns:
            Configured ContainerConfig instance
        """
        unknown = set(config_dict) - set(ContainerConfig.__dataclass_fields__)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {sorted(unknown)}")

        values = dict(config_dict)
        if 'filter_class_names' in values and not isinstance(values['filter_class_names'], str):
            values['filter_class_names'] = list(values['filter_class_names'])

        self._config = ContainerConfig(**values)
        return self._config

    def override_setting(self, key: str, value: Any) -> 'ConfigurationFactory':
        """
        Override a specific configuration setting.

        Args:
            key: Configuration key to override
            value: New value for the setting

        Returns:
            Self for method chaining
        """
        if key not in ContainerConfig.__dataclass_fields__:
            raise ConfigError(f"Unknown configuration key: {key}")

        # Validate on a candidate so a rejected value leaves no trace
        if self._config is not None:
            candidate = replace(self._config, **{key: value})
        else:
            candidate = ContainerConfig(**{key: value})

        self._env_overrides[key] = value
        if self._config is not None:
            self._config = candidate

        return self

    def get_config(self) -> ContainerConfig:
        """
        Get the current configuration.

        Raises:
            ConfigError: If no configuration has been loaded
        """
        if self._config is None:
            raise ConfigError("Configuration not loaded. Call load_from_environment() or load_from_dict() first.")
        return self._config

    def reset(self) -> 'ConfigurationFactory':
        """Reset the factory (useful for testing)"""
        self._config = None
        self._env_overrides.clear()
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert current configuration to dictionary"""
        if self._config is None:
            raise ConfigError("Configuration not loaded")

        return {
            'enable_auto_wiring': self._config.enable_auto_wiring,
            'filter_class_names': list(self._config.filter_class_names),
        }


# Global factory instance
_config_factory = ConfigurationFactory()


def get_config() -> ContainerConfig:
    """Get the global container configuration"""
    return _config_factory.get_config()


def load_config(env_prefix: str = DEFAULT_ENV_PREFIX) -> ContainerConfig:
    """Load configuration from environment variables"""
    return _config_factory.load_from_environment(env_prefix)


def load_config_from_dict(config_dict: Dict[str, Any]) -> ContainerConfig:
    """Load configuration from dictionary"""
    return _config_factory.load_from_dict(config_dict)


def override_config(key: str, value: Any) -> ConfigurationFactory:
    """Override a configuration setting"""
    return _config_factory.override_setting(key, value)


def reset_config() -> ConfigurationFactory:
    """Reset the global configuration factory"""
    return _config_factory.reset()
