"""
Enumerations for field resolution models.
"""

from enum import Enum


class SourceKind(str, Enum):
    """Shape of a fetched source response."""
    HTML = "HTML"
    JSON = "JSON"
    FAILURE = "FAILURE"


class Tier(str, Enum):
    """Stage of the fallback chain that produced a value."""
    SEARCH = "SEARCH"
    ENCYCLOPEDIA = "ENCYCLOPEDIA"
    PLACEHOLDER = "PLACEHOLDER"


class FieldStatus(str, Enum):
    """Outcome of resolving one field in a batch."""
    OK = "OK"
    EMPTY = "EMPTY"
    ERROR = "ERROR"
