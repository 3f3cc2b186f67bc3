"""
Snippet Extractor — pull a short candidate answer out of a source response.

Rules:
  - HTML search results: first result snippet, else the first non-empty
    of the first few result bodies.
  - Encyclopedia JSON: snippet of the first search hit, markup removed.
  - Never truncates; the resolver decides how much to keep.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional

from bs4 import BeautifulSoup

from models.enums import SourceKind
from models.schema import SourceResponse

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<[^>]*>")


def strip_tags(text: str) -> str:
    """Delete every ``<...>`` substring."""
    return _TAG_RE.sub("", text)


class SnippetExtractor:
    """
    Extract snippets from search-result HTML and encyclopedia JSON.

    The selectors follow the DuckDuckGo HTML results page and can be
    overridden per instance when the markup changes.
    """

    SNIPPET_SELECTOR = ".result__snippet"
    BODY_SELECTOR = ".result__body"
    MAX_BODY_CANDIDATES = 3

    def __init__(
        self,
        snippet_selector: Optional[str] = None,
        body_selector: Optional[str] = None,
    ):
        self._snippet_selector = snippet_selector or self.SNIPPET_SELECTOR
        self._body_selector = body_selector or self.BODY_SELECTOR

    def extract(self, response: SourceResponse) -> Optional[str]:
        """Return a non-empty snippet, or None when nothing usable is found."""
        if response.kind == SourceKind.HTML:
            return self.extract_html(response.body or "")
        if response.kind == SourceKind.JSON:
            return self.extract_json(response.body)
        return None

    # ------------------------------------------------------------------
    # HTML
    # ------------------------------------------------------------------

    def extract_html(self, html: str) -> Optional[str]:
        soup = BeautifulSoup(html, "html.parser")

        first = soup.select_one(self._snippet_selector)
        if first is not None:
            text = first.get_text().strip()
            if text:
                return text

        bodies = soup.select(self._body_selector, limit=self.MAX_BODY_CANDIDATES)
        for body in bodies:
            text = body.get_text().strip()
            if text:
                return text

        logger.debug("No result snippet or body text in HTML response")
        return None

    # ------------------------------------------------------------------
    # JSON
    # ------------------------------------------------------------------

    def extract_json(self, payload: Any) -> Optional[str]:
        """Snippet of the first hit in a MediaWiki ``list=search`` payload."""
        if not isinstance(payload, dict):
            return None
        query = payload.get("query")
        if not isinstance(query, dict):
            return None
        hits = query.get("search")
        if not isinstance(hits, list) or not hits:
            return None
        first = hits[0]
        if not isinstance(first, dict):
            return None

        snippet = first.get("snippet")
        if not isinstance(snippet, str):
            return None
        text = strip_tags(snippet)
        return text or None


_default_extractor = SnippetExtractor()


def extract_snippet(response: SourceResponse) -> Optional[str]:
    """Module-level shortcut using the default selectors."""
    return _default_extractor.extract(response)
