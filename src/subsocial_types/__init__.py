"""
subsocial-types: aggregates runtime type definitions

Merges the types.json of every pallet, together with the runtime's own
types and Subsocial custom types, into one types.json for client libraries.
"""

__version__ = "0.1.0"
__author__ = "Subsocial Contributors"

# Core service imports
from .aggregation import TypeAggregationService, aggregate
from .settings import AppSettings
from .utils.logging_config import setup_logging

# Errors
from .aggregation.errors import (
    AggregationError,
    TypesReadError,
    TypesParseError,
    TypesWriteError,
)

__all__ = [
    # Services
    "TypeAggregationService",
    "aggregate",
    "AppSettings",

    # Logging
    "setup_logging",

    # Errors
    "AggregationError",
    "TypesReadError",
    "TypesParseError",
    "TypesWriteError",
]
