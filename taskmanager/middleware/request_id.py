"""Request id middleware (raw ASGI).

Every HTTP request gets an id, stored as request.state.request_id and echoed
in the response header. Error bodies carry it too (see exception_handlers).
"""

import re
import uuid
from typing import Callable

from starlette.datastructures import Headers, MutableHeaders

_SAFE_REQUEST_ID = re.compile(r"[A-Za-z0-9_-]{1,64}")


def sanitize_request_id(raw: str | None) -> str:
    """Keep a caller-supplied id only if it is a short token; else mint one."""
    candidate = (raw or "").strip()
    if _SAFE_REQUEST_ID.fullmatch(candidate):
        return candidate
    return uuid.uuid4().hex


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = sanitize_request_id(Headers(scope=scope).get(header_name))
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_with_id(message: dict) -> None:
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                MutableHeaders(scope=message)[header_name] = request_id
            await send(message)

        await app(scope, receive, send_with_id)

    return asgi_app
