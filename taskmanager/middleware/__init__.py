"""ASGI middleware (raw ASGI, no BaseHTTPMiddleware)."""

from taskmanager.middleware.request_id import RequestIDMiddleware
from taskmanager.middleware.timeout import TimeoutMiddleware

__all__ = ["RequestIDMiddleware", "TimeoutMiddleware"]
