from __future__ import annotations

from fastapi import Request
from fastapi.routing import APIRoute
from starlette.routing import Match
from starlette.types import Receive, Scope, Send

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]


class AnyMethodRoute(APIRoute):
    """Route that matches on path alone.

    ``methods`` only feeds route metadata; extension methods such as
    ``PROPFIND`` or ``PURGE`` reach the endpoint instead of getting a 405.
    """

    def matches(self, scope: Scope) -> tuple[Match, Scope]:
        match, child_scope = super().matches(scope)
        if match == Match.PARTIAL:
            return Match.FULL, child_scope
        return match, child_scope

    async def handle(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.app(scope, receive, send)


def request_path(request: Request) -> str:
    """The decoded request path, without re-parsing it as a URL.

    ``request.url.path`` would cut a decoded ``?`` or ``#`` short.
    """
    root_path = request.scope.get("root_path", "")
    path = request.scope["path"]
    if root_path and path.startswith(root_path):
        return path
    return root_path + path


def header_lists(request: Request) -> dict[str, list[str]]:
    """Group request headers by name, keeping repeated values in arrival order."""
    headers: dict[str, list[str]] = {}
    for name, value in request.headers.items():
        headers.setdefault(name, []).append(value)
    return headers
