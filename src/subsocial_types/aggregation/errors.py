"""
Exceptions raised while aggregating type definitions.
"""

from pathlib import Path
from typing import Union


class AggregationError(Exception):
    """Base class for failures that abort an aggregation run."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{reason}: {self.path}")


class TypesReadError(AggregationError):
    """Raised when a pallet's types file is missing or cannot be read."""
    pass


class TypesParseError(AggregationError):
    """Raised when a types file is not valid JSON or not a JSON object."""
    pass


class TypesWriteError(AggregationError):
    """Raised when the aggregated types file cannot be written."""
    pass
