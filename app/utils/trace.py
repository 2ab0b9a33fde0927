from __future__ import annotations

import uuid

import structlog
from fastapi import Request
from starlette.datastructures import Headers

TRACE_HEADER = "x-trace-id"
# ingress-nginx and most meshes stamp this one on the way in.
REQUEST_ID_HEADER = "x-request-id"


def make_trace_id() -> str:
    return uuid.uuid4().hex


def resolve_trace_id(headers: Headers) -> str:
    return headers.get(TRACE_HEADER) or headers.get(REQUEST_ID_HEADER) or make_trace_id()


async def trace_context_middleware(request: Request, call_next):
    """Bind a trace id for the request and send it back as ``x-trace-id``.

    The id lives in the structlog context, so every log line emitted while
    serving the request carries it.
    """
    trace_id = resolve_trace_id(request.headers)
    with structlog.contextvars.bound_contextvars(trace_id=trace_id):
        response = await call_next(request)
    response.headers[TRACE_HEADER] = trace_id
    return response


def get_trace_id() -> str:
    return structlog.contextvars.get_contextvars().get("trace_id") or make_trace_id()
