# dataroute/api/discovery.py
"""
Root-level health endpoint.
"""
from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health(request: Request) -> dict:
    raw_base_path = getattr(request.app.state, "raw_base_path", None)
    return {
        "status": "healthy",
        "raw_endpoint": raw_base_path if raw_base_path else "not configured",
    }
