"""
Configuration Factory Tests
Tests for the container configuration management system.
"""

import pytest

from service_container import ServiceContainer
from service_container.config_factory import (
    ConfigurationFactory, ContainerConfig, ConfigError,
    load_config, load_config_from_dict, get_config, reset_config, override_config
)


class TestContainerConfig:
    """Test ContainerConfig dataclass"""

    def test_config_initialization_with_defaults(self):
        config = ContainerConfig()

        assert config.enable_auto_wiring is True
        assert config.filter_class_names == ['Interface', 'Abstract']

    def test_default_filters_not_shared(self):
        first = ContainerConfig()
        first.filter_class_names.append('Base')

        assert ContainerConfig().filter_class_names == ['Interface', 'Abstract']

    def test_config_validation_invalid_filter(self):
        with pytest.raises(ConfigError, match="Invalid filter class name"):
            ContainerConfig(filter_class_names=['Interface', ''])

    def test_config_validation_string_filters(self):
        with pytest.raises(ConfigError, match="sequence of strings"):
            ContainerConfig(filter_class_names='Interface')

    def test_config_validation_invalid_auto_wiring(self):
        with pytest.raises(ConfigError, match="Invalid enable_auto_wiring"):
            ContainerConfig(enable_auto_wiring='yes')

    def test_container_from_config(self):
        config = ContainerConfig(enable_auto_wiring=False, filter_class_names=['Contract'])
        container = ServiceContainer.from_config(config)

        assert container.auto_wiring_enabled is False
        assert container.filter_class_names == ['Contract']


class TestConfigurationFactory:
    """Test ConfigurationFactory loading and overrides"""

    def test_singleton(self):
        assert ConfigurationFactory() is ConfigurationFactory()

    def test_get_config_before_load_raises(self):
        with pytest.raises(ConfigError, match="Configuration not loaded"):
            get_config()

    def test_load_from_environment_defaults(self):
        config = load_config()

        assert config.enable_auto_wiring is True
        assert config.filter_class_names == ['Interface', 'Abstract']
        assert get_config() is config

    def test_load_from_environment_values(self, monkeypatch):
        monkeypatch.setenv('SERVICE_CONTAINER_ENABLE_AUTO_WIRING', 'false')
        monkeypatch.setenv('SERVICE_CONTAINER_FILTER_CLASS_NAMES', 'Contract, Base ,')

        config = load_config()

        assert config.enable_auto_wiring is False
        assert config.filter_class_names == ['Contract', 'Base']

    @pytest.mark.parametrize("raw", ['true', '1', 'YES', 'on'])
    def test_truthy_environment_values(self, monkeypatch, raw):
        monkeypatch.setenv('SERVICE_CONTAINER_ENABLE_AUTO_WIRING', raw)
        assert load_config().enable_auto_wiring is True

    def test_empty_filter_list_disables_stripping(self, monkeypatch):
        monkeypatch.setenv('SERVICE_CONTAINER_FILTER_CLASS_NAMES', '')
        assert load_config().filter_class_names == []

    def test_custom_prefix(self, monkeypatch):
        monkeypatch.setenv('APP_ENABLE_AUTO_WIRING', 'off')
        assert load_config('APP_').enable_auto_wiring is False

    def test_load_from_dict(self):
        config = load_config_from_dict({
            'enable_auto_wiring': False,
            'filter_class_names': ('Contract',),
        })

        assert config.enable_auto_wiring is False
        assert config.filter_class_names == ['Contract']

    def test_load_from_dict_unknown_key(self):
        with pytest.raises(ConfigError, match="Unknown configuration keys"):
            load_config_from_dict({'port': 5000})

    def test_override_applies_to_loaded_and_future_config(self):
        load_config()
        override_config('enable_auto_wiring', False)

        assert get_config().enable_auto_wiring is False
        assert load_config().enable_auto_wiring is False

    def test_override_is_validated(self):
        load_config()
        with pytest.raises(ConfigError):
            override_config('filter_class_names', [''])

    def test_override_unknown_key(self):
        with pytest.raises(ConfigError, match="Unknown configuration key"):
            override_config('debug', True)

    def test_to_dict(self):
        load_config_from_dict({'filter_class_names': ['Contract']})

        assert ConfigurationFactory().to_dict() == {
            'enable_auto_wiring': True,
            'filter_class_names': ['Contract'],
        }

    def test_to_dict_before_load_raises(self):
        with pytest.raises(ConfigError):
            ConfigurationFactory().to_dict()

    def test_rejected_override_leaves_config_untouched(self):
        load_config()
        with pytest.raises(ConfigError):
            override_config('filter_class_names', [''])

        assert get_config().filter_class_names == ['Interface', 'Abstract']
        assert load_config().filter_class_names == ['Interface', 'Abstract']

    def test_rejected_override_before_load(self):
        with pytest.raises(ConfigError):
            override_config('enable_auto_wiring', 'yes')

        assert load_config().enable_auto_wiring is True

    def test_reset(self):
        load_config()
        override_config('enable_auto_wiring', False)
        reset_config()

        with pytest.raises(ConfigError):
            get_config()
        assert load_config().enable_auto_wiring is True
