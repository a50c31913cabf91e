"""
Core settings management for isoview.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QSettings

from .types import ConfigError, ConfigVersion, ValidationResult
from .validation import SettingsValidator
from .view import ViewSettings
from .logging import LoggingSettings

logger = logging.getLogger(__name__)


class AppSettings:
    """
    Configuration management using QSettings.

    Provides type-safe access to application settings with automatic
    cross-platform storage and validation.
    """

    def __init__(
        self, profile: str = "default", file_path: Optional[Union[str, Path]] = None
    ):
        """Initialize settings with organization, application name, and profile.

        Args:
            profile: Settings profile name (default: "default")
            file_path: Explicit INI file to use instead of the platform store

        Raises:
            ConfigError: If the settings storage cannot be read
        """
        if file_path is not None:
            self.settings = QSettings(str(file_path), QSettings.Format.IniFormat)
        else:
            self.settings = QSettings("isoview", "isoview")

        if self.settings.status() != QSettings.Status.NoError:
            raise ConfigError(
                f"Cannot read settings from {self.settings.fileName()}: {self.settings.status()}"
            )

        self.profile = profile

        # Use profile as a group to create hierarchy: isoview/isoview/default/...
        self.settings.beginGroup(profile)

        self._validator = SettingsValidator(self)
        self._view = ViewSettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        self._ensure_version()

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    def _ensure_version(self) -> None:
        """Write configuration version on first run."""
        if not str(self.settings.value("app/version", "")):
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
            self.settings.sync()
            logger.info("First run detected, initializing configuration")

    # === SUBSYSTEM ACCESS ===

    @property
    def view(self) -> ViewSettings:
        """Access grid view settings subsystem."""
        return self._view

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    @property
    def version(self) -> str:
        """Get configuration version."""
        value = self.settings.value("app/version", ConfigVersion.CURRENT.value)
        return str(value) if value is not None else ConfigVersion.CURRENT.value

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    # === UTILITY METHODS ===

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()
