"""
Accumulator for merged type definitions.

Provides TypesAccumulator, which folds an ordered sequence of type mappings
into one mapping where the most recently added source wins on a shared key.
"""

import logging
from typing import Iterable, List, Mapping, Tuple

from .models import TypeDefinition, TypeMapping


class TypesAccumulator:
    """Collects type definitions from successive sources.

    Sources are merged in the order they are added. A key that is already
    present is silently overwritten by the newer source.
    """

    def __init__(self):
        # Merged result: type name -> definition
        self.types: TypeMapping = {}

        # Names of merged sources (in order of addition)
        self.sources: List[str] = []
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def add_types(self, types: Mapping[str, TypeDefinition], source: str) -> None:
        """Merge a mapping of types from a named source.

        Args:
            types: Mapping of type names to definitions
            source: Name of the source (pallet name or seed table name)
        """
        self.sources.append(source)
        for name, definition in types.items():
            self.types[name] = definition
        self.logger.debug(f"Merged {len(types)} types from '{source}'")

    def add_all(self, sources: Iterable[Tuple[str, Mapping[str, TypeDefinition]]]) -> None:
        """Merge several (source, types) pairs in order."""
        for source, types in sources:
            self.add_types(types, source)

    def get_types(self) -> TypeMapping:
        """Return a shallow copy of the merged types."""
        return dict(self.types)

    def get_sources(self) -> List[str]:
        """Return a copy of the list of merged sources."""
        return self.sources.copy()

    def __len__(self) -> int:
        return len(self.types)
