"""
File loaders for pallet type definitions.

Reads a pallet's types.json and parses it with orjson.
"""

import logging
from pathlib import Path

import orjson

from .errors import TypesParseError, TypesReadError
from .models import TypeMapping


class TypesFileLoader:
    """Loads and parses per-pallet types files."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.logger.debug("TypesFileLoader initialized")

    def read_types_file(self, types_file: Path) -> TypeMapping:
        """Read a types file and return the JSON object it contains.

        Values are kept as parsed; only the top level must be an object.

        Args:
            types_file: Path to the pallet's types.json

        Returns:
            Dictionary mapping type names to their definitions

        Raises:
            TypesReadError: The file is missing or cannot be read
            TypesParseError: The contents are not a JSON object
        """
        try:
            with types_file.open("rb") as f:  # orjson works with bytes
                raw = f.read()
        except OSError as e:
            raise TypesReadError(types_file, f"Cannot read types file ({e.strerror or e})") from e

        try:
            data = orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            raise TypesParseError(types_file, f"Invalid JSON in types file ({e})") from e

        if not isinstance(data, dict):
            raise TypesParseError(
                types_file,
                f"Types file must contain a JSON object, got {type(data).__name__}",
            )

        self.logger.debug(f"Read {len(data)} types from {types_file}")
        return data
