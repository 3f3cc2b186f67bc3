"""
Models package initialization.
"""

from .enums import SourceKind, Tier, FieldStatus
from .schema import (
    ResultRow,
    DEFAULT_FIELD_NAMES,
    FieldDefinition,
    SourceResponse,
    Resolution,
    default_fields,
)

__all__ = [
    "SourceKind",
    "Tier",
    "FieldStatus",
    "ResultRow",
    "DEFAULT_FIELD_NAMES",
    "FieldDefinition",
    "SourceResponse",
    "Resolution",
    "default_fields",
]
