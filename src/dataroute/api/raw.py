# dataroute/api/raw.py
"""
Raw data endpoint.

Every request below the mount prefix is resolved to a data service and
handed to a ``DataDispatcher`` as a ``RawQuery``::

    {mount_prefix}{namespace...}/{EntityName}{/uri_path}?{raw_query}

Status codes:

* 400 - the path does not name a data service.
* 404 - hidden service (unless exposed), or the dispatcher raised ``LookupError``.
* ``DataError.status_code`` - forwarded from the dispatcher.
* 500 - any other dispatcher failure.
"""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from dataroute.api.dependencies import raw_query_dependency
from dataroute.contracts.data import DataDispatcher, DataError, RawQuery

logger = logging.getLogger(__name__)

RAW_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


def _to_response(result: Any) -> Response:
    if result is None:
        return Response(status_code=204)
    if isinstance(result, Response):
        return result
    if isinstance(result, (bytes, bytearray)):
        return Response(content=bytes(result), media_type="application/octet-stream")
    if isinstance(result, str):
        return PlainTextResponse(result)
    return JSONResponse(jsonable_encoder(result))


def build_raw_router(
    dispatcher: DataDispatcher,
    *,
    mount_prefix: str = "/raw/",
    expose_hidden: bool = False,
) -> APIRouter:
    """Build the raw endpoint router.

    ``mount_prefix`` is the full path prefix of the endpoint; the router
    itself is included at the application root.
    """
    if not mount_prefix.endswith("/"):
        mount_prefix += "/"

    router = APIRouter(tags=["raw"])
    get_raw_query = raw_query_dependency(mount_prefix, expose_hidden=expose_hidden)

    @router.api_route(mount_prefix + "{path:path}", methods=RAW_METHODS)
    async def raw_request(query: RawQuery = Depends(get_raw_query)) -> Response:
        try:
            result = await dispatcher.dispatch(query)
        except DataError as exc:
            logger.info(
                "Data service '%s' failed with status %d", query.qualified_name, exc.status_code
            )
            raise HTTPException(status_code=exc.status_code, detail=exc.message)
        except LookupError:
            raise HTTPException(
                status_code=404,
                detail=f"Data service '{query.qualified_name}' not found",
            )
        except Exception:
            logger.exception("Dispatch failed for '%s'", query.qualified_name)
            raise HTTPException(status_code=500, detail="Data request failed")
        return _to_response(result)

    return router
