"""Config settings – 12-factor env-based configuration."""
from smartsender_mailer.config.settings.base import Settings
from smartsender_mailer.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
