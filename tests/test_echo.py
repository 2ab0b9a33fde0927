import pytest
from starlette.requests import Request

from app.api.routes.echo import echo
from app.schemas.common import WELCOME_MESSAGE
from app.utils.http import header_lists, request_path


def _make_request(method: str, path: str, headers: list[tuple[bytes, bytes]]) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0", "spec_version": "2.3"},
        "http_version": "1.1",
        "method": method,
        "scheme": "http",
        "path": path,
        "raw_path": path.encode("ascii"),
        "query_string": b"",
        "root_path": "",
        "headers": headers,
        "client": ("127.0.0.1", 12345),
        "server": ("testserver", 80),
    }
    return Request(scope)


def test_header_lists_groups_repeated_names():
    request = _make_request(
        "GET",
        "/",
        [(b"accept", b"text/html"), (b"cookie", b"a=1"), (b"cookie", b"b=2")],
    )

    assert header_lists(request) == {"accept": ["text/html"], "cookie": ["a=1", "b=2"]}


def test_header_lists_empty():
    request = _make_request("GET", "/", [])

    assert header_lists(request) == {}


@pytest.mark.asyncio
async def test_echo_builds_response_from_request():
    request = _make_request("PUT", "/svc/a", [(b"host", b"example.internal")])

    response = await echo(request, full_path="svc/a")

    assert response.message == WELCOME_MESSAGE
    assert response.path == "/svc/a"
    assert response.method == "PUT"
    assert response.headers == {"host": ["example.internal"]}


def test_request_path_keeps_decoded_query_marker():
    request = _make_request("GET", "/a?b", [])

    assert request_path(request) == "/a?b"


def test_request_path_prefixes_root_path():
    request = _make_request("GET", "/echo", [])
    request.scope["root_path"] = "/svc"

    assert request_path(request) == "/svc/echo"


def test_request_path_does_not_double_root_path():
    request = _make_request("GET", "/svc/echo", [])
    request.scope["root_path"] = "/svc"

    assert request_path(request) == "/svc/echo"
