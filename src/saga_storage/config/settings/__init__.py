"""Config settings – env-based configuration."""
from saga_storage.config.settings.base import SagaStorageSettings, Settings
from saga_storage.config.settings.factory import SettingsFactory
from saga_storage.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "SagaStorageSettings", "Settings", "SettingsFactory", "SettingsLoader"]
