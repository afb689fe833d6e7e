"""
Core settings management for subsocial-types.
"""

import logging
from pathlib import Path
from typing import Mapping, Optional, Sequence, Tuple, Union

from ..aggregation.models import TypeDefinition
from .types import ValidationResult
from .validation import SettingsValidator
from .paths import PathSettings
from .modules import ModuleSettings
from .logging import LoggingSettings

logger = logging.getLogger(__name__)


class AppSettings:
    """
    Configuration for one aggregation run.

    Defaults reproduce the fixed pallet list, override tables and paths.
    Constructor arguments let tests and embedding code point the tool at
    another tree.
    """

    def __init__(
        self,
        base_dir: Optional[Union[str, Path]] = None,
        modules: Optional[Sequence[str]] = None,
        runtime_types: Optional[Mapping[str, TypeDefinition]] = None,
        custom_types: Optional[Mapping[str, TypeDefinition]] = None,
    ):
        """Initialize settings.

        Args:
            base_dir: Directory relative paths are resolved against (default: cwd)
            modules: Pallet names in merge order (default: PALLETS)
            runtime_types: Runtime-own override table (default: RUNTIME_OWN_TYPES)
            custom_types: Custom override table (default: SUBSOCIAL_CUSTOM_TYPES)
        """
        # Initialize subsystems
        self._paths = PathSettings(base_dir)
        self._modules = ModuleSettings(modules, runtime_types, custom_types)
        self._logging = LoggingSettings()
        self._validator = SettingsValidator(self)

        logger.debug(
            f"Settings initialized with {len(self.modules)} pallets, base directory: {self.base_dir}"
        )

    # === SUBSYSTEM ACCESS ===

    @property
    def paths(self) -> PathSettings:
        """Access path settings subsystem."""
        return self._paths

    @property
    def pallets(self) -> ModuleSettings:
        """Access pallet settings subsystem."""
        return self._modules

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    # === PATH SETTINGS (DELEGATED) ===

    @property
    def base_dir(self) -> Path:
        """Get the directory relative paths are resolved against."""
        return self._paths.base_dir

    @base_dir.setter
    def base_dir(self, value: Union[str, Path]) -> None:
        """Set the directory relative paths are resolved against."""
        self._paths.base_dir = value

    def module_types_path(self, module: str) -> Path:
        """Get the types file path for a pallet."""
        return self._paths.module_types_path(module)

    @property
    def output_path(self) -> Path:
        """Get the aggregated types file path."""
        return self._paths.output_path

    # === PALLET SETTINGS (DELEGATED) ===

    @property
    def modules(self) -> Tuple[str, ...]:
        """Get pallet names in merge order."""
        return self._modules.modules

    @property
    def runtime_types(self) -> Mapping[str, TypeDefinition]:
        """Get types native to the runtime."""
        return self._modules.runtime_types

    @property
    def custom_types(self) -> Mapping[str, TypeDefinition]:
        """Get custom override types."""
        return self._modules.custom_types

    # === LOGGING SETTINGS (DELEGATED) ===

    @property
    def console_logging(self) -> bool:
        """Check if console logging is enabled."""
        return self._logging.console_logging

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        """Set console logging enabled state."""
        self._logging.console_logging = value

    @property
    def console_log_level(self) -> str:
        """Get console logging level."""
        return self._logging.console_log_level

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        """Set console logging level."""
        self._logging.console_log_level = value

    @property
    def console_use_colors(self) -> bool:
        """Check if console should use colors."""
        return self._logging.console_use_colors

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        """Set console color usage."""
        self._logging.console_use_colors = value

    @property
    def file_logging(self) -> bool:
        """Check if file logging is enabled."""
        return self._logging.file_logging

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        """Set file logging enabled state."""
        self._logging.file_logging = value

    @property
    def log_file_path(self) -> str:
        """Get log file path (read-only)."""
        return self._logging.log_file_path

    @property
    def log_file_absolute_path(self) -> Path:
        """Get absolute path to log file."""
        return self._logging.log_file_absolute_path

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()
