"""
SourceClient — thin HTTP layer over httpx for the resolver tiers.

Every fetch returns a SourceResponse. Transport problems (timeouts,
connection errors, non-2xx statuses, undecodable JSON) come back as
FAILURE responses instead of exceptions, so each tier only has to
check the response kind.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

import httpx

from models.enums import SourceKind
from models.schema import SourceResponse

logger = logging.getLogger(__name__)


class SourceClient:
    """Issue GET requests and wrap the outcome as a SourceResponse."""

    def __init__(self, client: Optional[httpx.Client] = None):
        # An injected client is owned by the caller (tests pass one
        # backed by httpx.MockTransport).
        self._client = client

    def fetch(
        self,
        url: str,
        kind: SourceKind,
        timeout: float,
        params: Optional[Dict[str, str]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> SourceResponse:
        """
        Fetch ``url`` and decode the body as ``kind`` (HTML or JSON).

        Query parameters are percent-encoded by httpx.
        """
        try:
            if self._client is not None:
                resp = self._client.get(
                    url, params=params, headers=headers, timeout=timeout
                )
            else:
                with httpx.Client(follow_redirects=True, timeout=timeout) as client:
                    resp = client.get(url, params=params, headers=headers)
            resp.raise_for_status()
        except httpx.TimeoutException as e:
            logger.warning(f"Timed out after {timeout}s fetching {url}: {e}")
            return SourceResponse.failure(url, f"timeout: {e}")
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(f"HTTP {status} from {url}")
            return SourceResponse.failure(url, f"http status {status}", status_code=status)
        except httpx.HTTPError as e:
            logger.warning(f"Request to {url} failed: {e}")
            return SourceResponse.failure(url, f"network: {e}")

        final_url = str(resp.url)

        if kind == SourceKind.JSON:
            try:
                body = resp.json()
            except ValueError as e:
                logger.warning(f"Malformed JSON from {final_url}: {e}")
                return SourceResponse.failure(
                    final_url, f"malformed json: {e}", status_code=resp.status_code
                )
            return SourceResponse(
                kind=SourceKind.JSON,
                url=final_url,
                body=body,
                status_code=resp.status_code,
            )

        return SourceResponse(
            kind=SourceKind.HTML,
            url=final_url,
            body=resp.text,
            status_code=resp.status_code,
        )
