"""Config settings – 12-factor env-based configuration."""
from valkit.config.settings.base import Settings
from valkit.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
