"""
Settings package for subsocial-types.

This package provides typed access to the configuration of an aggregation
run: paths, the pallet list with its override tables, and logging options.

Usage:
    from subsocial_types.settings import AppSettings, ValidationResult

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ValidationResult
from .paths import PathSettings
from .modules import ModuleSettings
from .logging import LoggingSettings

__all__ = [
    "AppSettings",
    "ValidationResult",
    "PathSettings",
    "ModuleSettings",
    "LoggingSettings",
]
