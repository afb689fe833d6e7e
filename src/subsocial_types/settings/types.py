"""
Configuration type definitions for subsocial-types.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
