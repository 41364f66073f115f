"""API v1: router aggregation exported as api_router."""

from taskmanager.api.v1.router import api_router

__all__ = ["api_router"]
