"""
Pallet-related settings for subsocial-types.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

from ..aggregation.models import (
    PALLETS,
    RUNTIME_OWN_TYPES,
    SUBSOCIAL_CUSTOM_TYPES,
    TypeDefinition,
)


class ModuleSettings:
    """Holds the ordered pallet list and the two override tables.

    Values are frozen on construction; the defaults are the module-level
    constants from the aggregation models.
    """

    def __init__(
        self,
        modules: Optional[Sequence[str]] = None,
        runtime_types: Optional[Mapping[str, TypeDefinition]] = None,
        custom_types: Optional[Mapping[str, TypeDefinition]] = None,
    ):
        self._modules: Tuple[str, ...] = (
            tuple(modules) if modules is not None else PALLETS
        )
        self._runtime_types = (
            MappingProxyType(dict(runtime_types))
            if runtime_types is not None
            else RUNTIME_OWN_TYPES
        )
        self._custom_types = (
            MappingProxyType(dict(custom_types))
            if custom_types is not None
            else SUBSOCIAL_CUSTOM_TYPES
        )

    @property
    def modules(self) -> Tuple[str, ...]:
        """Get pallet names in merge order."""
        return self._modules

    @property
    def runtime_types(self) -> Mapping[str, TypeDefinition]:
        """Get types native to the runtime (seeded first)."""
        return self._runtime_types

    @property
    def custom_types(self) -> Mapping[str, TypeDefinition]:
        """Get custom types (seeded after runtime types)."""
        return self._custom_types
