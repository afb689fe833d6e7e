"""
Path-related settings for subsocial-types.
"""

from pathlib import Path
from typing import Optional, Union

# Relative to the base directory (the scripts/ folder of the node repository)
MODULE_TYPES_TEMPLATE = "../pallets/{module}/types.json"
OUTPUT_FILE_PATH = "../types.json"


class PathSettings:
    """Manages path-related settings."""

    def __init__(self, base_dir: Optional[Union[str, Path]] = None):
        self._base_dir = Path(base_dir) if base_dir is not None else Path.cwd()

    @property
    def base_dir(self) -> Path:
        """Get the directory that relative paths are resolved against."""
        return self._base_dir

    @base_dir.setter
    def base_dir(self, value: Union[str, Path]) -> None:
        """Set the directory that relative paths are resolved against."""
        self._base_dir = Path(value)

    def module_types_path(self, module: str) -> Path:
        """Get the types file path for a pallet."""
        return self._base_dir / MODULE_TYPES_TEMPLATE.format(module=module)

    @property
    def output_path(self) -> Path:
        """Get the aggregated types file path."""
        return self._base_dir / OUTPUT_FILE_PATH
