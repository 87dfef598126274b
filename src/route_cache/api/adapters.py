"""Starlette adapters for the HTTP pipeline protocols."""

from collections.abc import Mapping
from typing import Any

from fastapi import Request, Response
from fastapi.responses import JSONResponse


class StarletteCacheRequest:
    """CacheRequest view over a Starlette/FastAPI request."""

    def __init__(self, request: Request) -> None:
        self._request = request

    @property
    def method(self) -> str:
        return self._request.method

    @property
    def url(self) -> str:
        path = self._request.url.path
        query = self._request.url.query
        return f"{path}?{query}" if query else path

    @property
    def cookies(self) -> Mapping[str, str]:
        return self._request.cookies

    @property
    def headers(self) -> Mapping[str, str]:
        # Starlette headers are already case-insensitive
        return self._request.headers


class StarletteResponseSink:
    """ResponseSink that collects a handler's output into a Starlette response.

    Handlers call ``write_raw`` for text bodies or ``write_structured`` for
    JSON values, and may adjust ``set_status`` / ``set_header`` first.
    ``to_response()`` produces what the endpoint returns.
    """

    raw_media_type = "text/html; charset=utf-8"

    def __init__(self) -> None:
        self._headers: dict[str, str] = {}
        self._status_code = 200
        self._response: Response | None = None

    def set_header(self, name: str, value: str) -> None:
        self._headers[name] = value
        if self._response is not None:
            self._response.headers[name] = value

    def set_status(self, status_code: int) -> None:
        self._status_code = status_code

    async def write_raw(self, body: Any) -> None:
        if not isinstance(body, (str, bytes, bytearray)):
            await self.write_structured(body)
            return
        self._response = Response(
            content=bytes(body) if isinstance(body, bytearray) else body,
            status_code=self._status_code,
            headers=self._headers,
            media_type=self.raw_media_type,
        )

    async def write_structured(self, body: Any) -> None:
        self._response = JSONResponse(
            content=body,
            status_code=self._status_code,
            headers=self._headers,
        )

    def to_response(self) -> Response:
        """Return the written response, or an empty one if nothing was written."""
        if self._response is None:
            return Response(status_code=self._status_code, headers=self._headers)
        return self._response
