from __future__ import annotations

import socket

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import ORJSONResponse

from app.api.router import router
from app.core.config import get_settings
from app.core.logging import configure_logging, get_logger
from app.schemas.common import APP_VERSION, ErrorResponse
from app.utils.trace import get_trace_id, trace_context_middleware

# Dual-stack (IPv4-mapped addresses allowed); only the port is configurable.
LISTEN_HOST = "::"
IPV4_FALLBACK_HOST = "0.0.0.0"

settings = get_settings()
configure_logging(settings.log_level, settings.environment)
logger = get_logger(__name__)


# No generated docs: /docs, /redoc and /openapi.json belong to the echo route.
app = FastAPI(
    title=settings.app_name,
    version=APP_VERSION,
    default_response_class=ORJSONResponse,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)
app.middleware("http")(trace_context_middleware)


@app.exception_handler(Exception)
async def unhandled_exception_handler(_: Request, exc: Exception):
    logger.exception("unhandled_exception", error=str(exc))
    return ORJSONResponse(
        status_code=500,
        content=ErrorResponse(detail="Internal server error", trace_id=get_trace_id()).model_dump(),
    )


app.include_router(router)


def _open_socket(host: str) -> tuple[socket.socket, str]:
    if ":" not in host:
        return socket.socket(socket.AF_INET, socket.SOCK_STREAM), host
    sock: socket.socket | None = None
    try:
        sock = socket.socket(socket.AF_INET6, socket.SOCK_STREAM)
        sock.setsockopt(socket.IPPROTO_IPV6, socket.IPV6_V6ONLY, 0)
    except OSError as exc:
        if sock is not None:
            sock.close()
        logger.warning("ipv6_unavailable", fallback_host=IPV4_FALLBACK_HOST, error=str(exc))
        return socket.socket(socket.AF_INET, socket.SOCK_STREAM), IPV4_FALLBACK_HOST
    return sock, host


def bind_listener(host: str, port: int) -> socket.socket:
    """Bind the listening socket, exiting the process with status 1 on failure."""
    sock, host = _open_socket(host)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as exc:
        sock.close()
        logger.error("listener_bind_failed", host=host, port=port, error=str(exc))
        raise SystemExit(1) from exc
    sock.set_inheritable(True)
    return sock


def run() -> None:
    logger.info("server_starting", port=settings.port)
    sock = bind_listener(LISTEN_HOST, settings.port)
    config = uvicorn.Config(app, log_level=settings.log_level.lower())
    server = uvicorn.Server(config)
    server.run(sockets=[sock])
