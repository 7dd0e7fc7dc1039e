"""Dependencies shared by the API routers."""

from fastapi import Request

from ..services.whisky_store import WhiskyStore


def get_store(request: Request) -> WhiskyStore:
    """Return the store the application was built with."""
    return request.app.state.store
