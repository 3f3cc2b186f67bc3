"""POST /api/search — resolve a single query through the fallback chain."""

import asyncio
import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from search.resolver import Resolver
from server.dependencies import get_resolver

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Search"])

QUERY_REQUIRED = "Query is required"
SEARCH_FAILED = "Failed to perform search"


class SearchResponse(BaseModel):
    result: str


class ErrorResponse(BaseModel):
    error: str


@router.post(
    "/search",
    response_model=SearchResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def search(request: Request, resolver: Resolver = Depends(get_resolver)):
    """
    Resolve ``{"query": ...}`` to ``{"result": ...}``.

    A handled fallback (placeholder value) is still a 200. Only a missing
    query (400) or an unexpected defect (500) produce ``{"error": ...}``.
    """
    try:
        payload = await request.json()

        query = payload.get("query") if isinstance(payload, dict) else None
        if not query or not isinstance(query, str):
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"error": QUERY_REQUIRED},
            )

        result = await asyncio.to_thread(resolver.resolve, query)
        return SearchResponse(result=result)
    except Exception:
        logger.exception("Search error")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": SEARCH_FAILED},
        )
