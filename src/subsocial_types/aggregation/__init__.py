"""
Module for aggregating runtime type definitions.

Provides the service that merges every pallet's types.json together with
the runtime and custom override tables into a single types file.
"""

from .service import TypeAggregationService, aggregate
from .models import (
    TypeDefinition,
    TypeMapping,
    PALLETS,
    RUNTIME_OWN_TYPES,
    SUBSOCIAL_CUSTOM_TYPES,
)
from .errors import (
    AggregationError,
    TypesReadError,
    TypesParseError,
    TypesWriteError,
)
from .managers import TypesAccumulator
from .loaders import TypesFileLoader
from .writers import TypesFileWriter, serialize_types

# Public exports
__all__ = [
    # Main service
    "TypeAggregationService",
    "aggregate",
    # Type aliases
    "TypeDefinition",
    "TypeMapping",
    # Constants
    "PALLETS",
    "RUNTIME_OWN_TYPES",
    "SUBSOCIAL_CUSTOM_TYPES",
    # Errors
    "AggregationError",
    "TypesReadError",
    "TypesParseError",
    "TypesWriteError",
    # Component classes (for advanced usage)
    "TypesAccumulator",
    "TypesFileLoader",
    "TypesFileWriter",
    "serialize_types",
]
