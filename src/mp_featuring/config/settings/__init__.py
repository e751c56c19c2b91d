"""Config settings – 12-factor env-based configuration."""
from mp_featuring.config.settings.base import FeatureFlagSettings, Settings
from mp_featuring.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "FeatureFlagSettings", "Settings", "SettingsLoader"]
