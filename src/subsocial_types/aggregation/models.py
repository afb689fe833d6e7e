"""
Data models for runtime type definitions.

Contains type aliases and the fixed configuration used by the aggregation
package: the ordered list of pallets and the two override tables that are
seeded before any pallet types are merged.
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple, TypeAlias

# Type aliases for clarity
TypeDefinition: TypeAlias = Any
"""A single type definition: an alias string or a structured JSON value."""

TypeMapping: TypeAlias = Dict[str, TypeDefinition]
"""Maps type name (e.g. 'SpaceId') to its definition."""


# Pallets whose types.json files are aggregated, in merge order
PALLETS: Tuple[str, ...] = (
    "donations",
    "moderation",
    "permissions",
    "post-history",
    "posts",
    "profile-history",
    "profiles",
    "reactions",
    "roles",
    "scores",
    "session-keys",
    "space-history",
    "spaces",
    "subscriptions",
    "utils",
)

# Types native to the runtime itself (they come from the runtime's lib.rs)
RUNTIME_OWN_TYPES: Mapping[str, TypeDefinition] = MappingProxyType(
    {
        "Address": "AccountId",
        "LookupSource": "AccountId",
    }
)

SUBSOCIAL_CUSTOM_TYPES: Mapping[str, TypeDefinition] = MappingProxyType(
    {
        "IpfsCid": "Text",
    }
)

# Source names used in logs for the two seed tables
RUNTIME_OWN_SOURCE = "runtime"
SUBSOCIAL_CUSTOM_SOURCE = "subsocial"
