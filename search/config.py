"""
Resolver configuration — endpoints, timeouts and pacing, read from environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


@dataclass
class ResolverConfig:
    """Settings for the tiered resolver and the batch loop."""

    search_url: str = "https://html.duckduckgo.com/html/"
    encyclopedia_url: str = "https://en.wikipedia.org/w/api.php"
    search_timeout: float = 10.0
    encyclopedia_timeout: float = 5.0
    user_agent: str = DEFAULT_USER_AGENT
    max_snippet_chars: int = 200
    batch_delay: float = 0.5

    @classmethod
    def from_env(cls) -> ResolverConfig:
        """Load configuration from environment variables."""
        return cls(
            search_url=os.getenv("SHEETFILL_SEARCH_URL", cls.search_url),
            encyclopedia_url=os.getenv("SHEETFILL_ENCYCLOPEDIA_URL", cls.encyclopedia_url),
            search_timeout=float(os.getenv("SHEETFILL_SEARCH_TIMEOUT", "10")),
            encyclopedia_timeout=float(os.getenv("SHEETFILL_ENCYCLOPEDIA_TIMEOUT", "5")),
            user_agent=os.getenv("SHEETFILL_USER_AGENT", DEFAULT_USER_AGENT),
            max_snippet_chars=int(os.getenv("SHEETFILL_MAX_SNIPPET", "200")),
            batch_delay=float(os.getenv("SHEETFILL_BATCH_DELAY", "0.5")),
        )
