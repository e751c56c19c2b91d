"""Config – feature flag settings and environment loading."""

from mp_featuring.config.settings import EnvSettingsLoader, FeatureFlagSettings, Settings, SettingsLoader
from mp_featuring.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "FeatureFlagSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
