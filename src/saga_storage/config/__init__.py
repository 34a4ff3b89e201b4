"""Config – 12-factor settings and loaders."""

from saga_storage.config.settings import (
    EnvSettingsLoader,
    SagaStorageSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from saga_storage.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SagaStorageSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
