"""
Output writer for aggregated type definitions.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Mapping

import orjson

from .errors import TypesWriteError
from .models import TypeDefinition

logger = logging.getLogger(__name__)


def serialize_types(types: Mapping[str, TypeDefinition]) -> bytes:
    """Serialize types as JSON indented with two spaces, keys in merge order."""
    return orjson.dumps(dict(types), option=orjson.OPT_INDENT_2)


class TypesFileWriter:
    """Writes the aggregated types file.

    The content goes to a temporary file next to the target, which then
    replaces the target. A failed run never leaves a truncated file behind.
    """

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def write_types(self, types: Mapping[str, TypeDefinition], output_file: Path) -> int:
        """Write types to output_file, replacing any existing file.

        Returns:
            Number of bytes written

        Raises:
            TypesWriteError: The file cannot be created or written
        """
        try:
            content = serialize_types(types)
        except orjson.JSONEncodeError as e:
            raise TypesWriteError(output_file, f"Cannot serialize types ({e})") from e

        try:
            fd, tmp_path_str = tempfile.mkstemp(
                dir=output_file.parent, prefix=".tmp_", suffix=".json"
            )
        except OSError as e:
            raise TypesWriteError(output_file, f"Cannot create types file ({e.strerror or e})") from e

        tmp_path = Path(tmp_path_str)
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(content)
            # mkstemp creates the file with mode 0600
            os.chmod(tmp_path, 0o644)
            tmp_path.replace(output_file)
        except OSError as e:
            try:
                tmp_path.unlink(missing_ok=True)
            except OSError:
                logger.warning(f"Could not remove temporary file {tmp_path}")
            raise TypesWriteError(output_file, f"Cannot write types file ({e.strerror or e})") from e

        self.logger.debug(f"Wrote {len(content)} bytes to {output_file}")
        return len(content)
