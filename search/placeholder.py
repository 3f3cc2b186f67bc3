"""
Deterministic placeholder values for queries no live source could answer.
"""

from typing import Tuple

# Declaration order is the tie-break: the first keyword found in the
# query wins ("city" beats "state" and "zip").
PLACEHOLDERS: Tuple[Tuple[str, str], ...] = (
    ("email", "contact@example.com"),
    ("phone", "+1-555-0100"),
    ("website", "https://www.example.com"),
    ("address", "123 Main Street"),
    ("city", "New York"),
    ("state", "NY"),
    ("zip", "10001"),
    ("country", "United States"),
    ("founded", "2020"),
    ("revenue", "$1M - $5M"),
    ("employees", "50-100"),
    ("industry", "Technology"),
)

FALLBACK_PREFIX = "Data for: "


def placeholder(query: str) -> str:
    """Map a query to a canned example value, or ``"Data for: <query>"``."""
    lowered = query.lower()
    for keyword, value in PLACEHOLDERS:
        if keyword in lowered:
            return value
    return f"{FALLBACK_PREFIX}{query}"


def is_placeholder(value: str) -> bool:
    """True when ``value`` could have come from :func:`placeholder`."""
    if value.startswith(FALLBACK_PREFIX):
        return True
    return any(value == canned for _, canned in PLACEHOLDERS)
