"""
Tiered Resolver — turns a query into a short text value.

Tiers, tried in order until one yields a snippet:

  A. Web search (DuckDuckGo HTML results page)
  B. Encyclopedia search API (Wikipedia)
  C. Deterministic placeholder

Each live tier returns the snippet or None; None means "fall through".
Live values are capped at ``max_snippet_chars``. Tier C always answers,
so resolve() never raises and never returns an empty string.
"""

from __future__ import annotations

import logging
from typing import Optional

from models.enums import SourceKind, Tier
from models.schema import Resolution

from .client import SourceClient
from .config import ResolverConfig
from .extractor import SnippetExtractor
from .placeholder import placeholder

logger = logging.getLogger(__name__)


class Resolver:
    """
    Resolve one query through the fallback chain.

    Usage:
        resolver = Resolver()
        value = resolver.resolve("Acme Corp headquarters city")
    """

    def __init__(
        self,
        client: Optional[SourceClient] = None,
        config: Optional[ResolverConfig] = None,
        extractor: Optional[SnippetExtractor] = None,
    ):
        self._client = client or SourceClient()
        self._config = config or ResolverConfig()
        self._extractor = extractor or SnippetExtractor()

    def resolve(self, query: str) -> str:
        return self.resolve_detailed(query).value

    def resolve_detailed(self, query: str) -> Resolution:
        """Run the tiers in order and report which one answered."""
        value = self._search_tier(query)
        if value:
            logger.info(f"Resolved '{query}' via web search")
            return Resolution(value=value, tier=Tier.SEARCH)

        value = self._encyclopedia_tier(query)
        if value:
            logger.info(f"Resolved '{query}' via encyclopedia")
            return Resolution(value=value, tier=Tier.ENCYCLOPEDIA)

        logger.info(f"No live source answered '{query}', using placeholder")
        return Resolution(value=placeholder(query), tier=Tier.PLACEHOLDER)

    # ------------------------------------------------------------------
    # Tiers
    # ------------------------------------------------------------------

    def _search_tier(self, query: str) -> Optional[str]:
        try:
            response = self._client.fetch(
                self._config.search_url,
                SourceKind.HTML,
                timeout=self._config.search_timeout,
                params={"q": query},
                headers={"User-Agent": self._config.user_agent},
            )
            if not response.ok:
                logger.warning(f"Web search failed for '{query}': {response.error}")
                return None
            snippet = self._extractor.extract(response)
        except Exception as e:
            logger.warning(f"Web search tier errored for '{query}': {e}")
            return None
        return self._cap(snippet)

    def _encyclopedia_tier(self, query: str) -> Optional[str]:
        try:
            response = self._client.fetch(
                self._config.encyclopedia_url,
                SourceKind.JSON,
                timeout=self._config.encyclopedia_timeout,
                params={
                    "action": "query",
                    "list": "search",
                    "srsearch": query,
                    "format": "json",
                    "origin": "*",
                },
            )
            if not response.ok:
                logger.warning(f"Encyclopedia lookup failed for '{query}': {response.error}")
                return None
            snippet = self._extractor.extract(response)
        except Exception as e:
            logger.warning(f"Encyclopedia tier errored for '{query}': {e}")
            return None
        return self._cap(snippet)

    def _cap(self, snippet: Optional[str]) -> Optional[str]:
        if not snippet:
            return None
        return snippet[: self._config.max_snippet_chars]
