"""Catch-all echo of request metadata.

The path, method and headers are reflected back exactly as received. Nothing
is filtered or escaped beyond JSON encoding, so this endpoint is only fit for
routing experiments, never for anything that needs header-injection
hardening.
"""

from __future__ import annotations

from fastapi import APIRouter, Request

from app.schemas.common import EchoResponse
from app.utils.http import ALL_METHODS, AnyMethodRoute, header_lists, request_path

router = APIRouter(route_class=AnyMethodRoute)


@router.api_route("/{full_path:path}", methods=ALL_METHODS, response_model=EchoResponse)
async def echo(request: Request, full_path: str) -> EchoResponse:
    return EchoResponse(
        path=request_path(request),
        method=request.method,
        headers=header_lists(request),
    )
