"""
Settings package for isoview.

This package provides type-safe configuration management
using Qt's QSettings for cross-platform storage.

Usage:
    from isoview.settings import AppSettings, ValidationResult

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigVersion, ConfigError, ValidationResult
from .view import ViewSettings
from .logging import LoggingSettings

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
    "ViewSettings",
    "LoggingSettings",
]
