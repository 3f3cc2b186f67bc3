"""
Data models for field definitions, source responses and resolution results.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .enums import SourceKind, Tier


# A single output record: field name -> resolved value, in field-list order.
ResultRow = Dict[str, str]


DEFAULT_FIELD_NAMES: List[str] = [
    "Company Name", "Website", "Email", "Phone", "Address", "City", "State", "ZIP Code",
    "Country", "Industry", "Description", "Founded Year", "Employee Count", "Revenue",
    "CEO Name", "Contact Person", "Job Title", "Department", "LinkedIn", "Twitter",
    "Facebook", "Instagram", "Annual Revenue", "Market Cap", "Stock Symbol", "Headquarters",
    "Parent Company", "Subsidiaries", "Products", "Services", "Competitors", "Technology Stack",
    "Customer Base", "Key Clients", "Partnerships", "Certifications", "Awards", "News",
]


class FieldDefinition(BaseModel):
    """A named slot to fill, with an optional custom lookup query."""
    name: str = Field("", description="User-visible column label")
    search_query: str = Field("", description="Overrides the name as lookup text when set")
    enabled: bool = Field(True, description="Whether the field takes part in a run")

    @field_validator("name", "search_query", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        """Spreadsheet cells may arrive as numbers or None."""
        if v is None:
            return ""
        return str(v)

    @property
    def effective_query(self) -> str:
        return self.search_query or self.name

    @property
    def is_runnable(self) -> bool:
        return self.enabled and bool(self.name)

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Company Name",
                "search_query": "",
                "enabled": True,
            }
        }


def default_fields() -> List[FieldDefinition]:
    """Fresh list of the built-in company-profile fields."""
    return [FieldDefinition(name=name) for name in DEFAULT_FIELD_NAMES]


@dataclass
class SourceResponse:
    """
    Raw response from one information source.

    Lives for a single resolver attempt. ``body`` is the page text for
    HTML responses, the decoded payload for JSON responses and None for
    failures (timeout, network error, non-2xx status, undecodable body).
    """

    kind: SourceKind
    url: str
    body: Any = None
    status_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind != SourceKind.FAILURE

    @classmethod
    def failure(
        cls,
        url: str,
        error: str,
        status_code: Optional[int] = None,
    ) -> "SourceResponse":
        return cls(
            kind=SourceKind.FAILURE,
            url=url,
            status_code=status_code,
            error=error,
        )


@dataclass
class Resolution:
    """Resolved value plus the tier that produced it."""

    value: str
    tier: Tier
