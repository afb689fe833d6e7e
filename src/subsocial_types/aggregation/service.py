"""
Main service for aggregating runtime type definitions.

Provides a high-level API that seeds the runtime and custom override
tables, merges every pallet's types.json in declared order and writes the
combined mapping to disk.
"""

import logging
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from .loaders import TypesFileLoader
from .managers import TypesAccumulator
from .models import TypeMapping, RUNTIME_OWN_SOURCE, SUBSOCIAL_CUSTOM_SOURCE
from .writers import TypesFileWriter

if TYPE_CHECKING:
    from ..settings import AppSettings


class TypeAggregationService:
    """Service for producing the aggregated types file.

    Responsible for reading each pallet's type definitions, merging them over
    the seeded override tables (later sources win) and persisting the result.
    Every read happens before the single write, so a failing pallet leaves the
    existing output untouched.
    """

    def __init__(self, settings: Optional["AppSettings"] = None):
        """Initialize the aggregation service.

        Args:
            settings: App settings with paths, pallet list and override
                      tables. Defaults are used when omitted.
        """
        if settings is None:
            from ..settings import AppSettings

            settings = AppSettings()

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.settings = settings

        # Initialize components
        self.loader = TypesFileLoader()
        self.writer = TypesFileWriter()

    def _seed(self, accumulator: TypesAccumulator) -> None:
        """Seed the accumulator with runtime-own then custom types."""
        accumulator.add_types(self.settings.runtime_types, RUNTIME_OWN_SOURCE)
        accumulator.add_types(self.settings.custom_types, SUBSOCIAL_CUSTOM_SOURCE)

    def collect(self) -> TypeMapping:
        """Read and merge all sources without writing anything.

        Returns:
            The merged types mapping

        Raises:
            TypesReadError: A pallet's types file is missing or unreadable
            TypesParseError: A pallet's types file is not a JSON object
        """
        accumulator = TypesAccumulator()
        self._seed(accumulator)

        modules = self.settings.modules
        self.logger.info(f"Aggregating types from {len(modules)} pallets")

        for module in modules:
            types_file = self.settings.module_types_path(module)
            accumulator.add_types(self.loader.read_types_file(types_file), module)

        self.logger.debug(f"Merged sources: {accumulator.get_sources()}")
        return accumulator.get_types()

    def aggregate(self) -> Path:
        """Aggregate all type definitions and write the output file.

        Returns:
            Path of the written file

        Raises:
            AggregationError: Any read, parse or write failure
        """
        types = self.collect()
        output_file = self.settings.output_path
        self.writer.write_types(types, output_file)
        self.logger.info(f"Wrote {len(types)} types to {output_file}")
        return output_file


def aggregate(settings: Optional["AppSettings"] = None) -> Path:
    """Run one aggregation with the given (or default) settings."""
    return TypeAggregationService(settings).aggregate()
