"""
Settings validation system for subsocial-types.
"""

import logging
from typing import List, Set, TYPE_CHECKING

from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        # Validate pallet list
        modules = self.settings.modules
        if not modules:
            errors.append("No pallets configured")

        seen: Set[str] = set()
        for module in modules:
            if not module.strip():
                errors.append("Pallet name must not be blank")
            elif "/" in module or "\\" in module:
                errors.append(f"Pallet name must not contain path separators: {module}")
            if module in seen:
                warnings.append(f"Pallet listed more than once: {module}")
            seen.add(module)

        # Validate output location
        output_dir = self.settings.output_path.parent
        if not output_dir.is_dir():
            warnings.append(f"Output directory does not exist: {output_dir}")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
