# dataroute/api/dependencies.py
"""
FastAPI dependencies for the raw endpoint.

Provides:
- ``make_raw_query``: Build a ``RawQuery`` from a request, or ``None``.
- ``raw_query_dependency``: Dependency factory that rejects requests naming
  no data service (400) or a hidden one (404).
"""
from __future__ import annotations

import logging
from typing import Awaitable, Callable

from fastapi import HTTPException, Request

from dataroute.contracts.data import RawQuery
from dataroute.core.naming import split_routing_path

logger = logging.getLogger(__name__)


def make_raw_query(request: Request, mount_prefix: str) -> RawQuery | None:
    """Resolve the request path below ``mount_prefix`` into a RawQuery."""
    split = split_routing_path(request.url.path, mount_prefix)
    if split is None:
        return None
    qualified_name, uri_path = split
    return RawQuery(
        qualified_name=qualified_name,
        uri_path=uri_path,
        raw_query=request.url.query,
        method=request.method.upper(),
        headers=dict(request.headers),
    )


def raw_query_dependency(
    mount_prefix: str,
    *,
    expose_hidden: bool = False,
) -> Callable[[Request], Awaitable[RawQuery]]:
    """Build a dependency resolving requests below ``mount_prefix``."""

    async def get_raw_query(request: Request) -> RawQuery:
        query = make_raw_query(request, mount_prefix)
        if query is None:
            raise HTTPException(
                status_code=400,
                detail=f"Path '{request.url.path}' does not name a data service",
            )
        if query.qualified_name.is_hidden and not expose_hidden:
            logger.info("Rejected request to hidden data service '%s'", query.qualified_name)
            raise HTTPException(
                status_code=404,
                detail=f"Data service '{query.qualified_name}' not found",
            )
        return query

    return get_raw_query
