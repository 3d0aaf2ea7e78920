"""Request dependencies shared by the routers."""

from fastapi import Request

from ..context import AppContext


def get_context(request: Request) -> AppContext:
    """Get the application context from app state."""
    return request.app.state.context
