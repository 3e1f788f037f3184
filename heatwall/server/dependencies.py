"""FastAPI dependency helpers for config."""

from fastapi import Request


def get_config(request: Request) -> dict:
    """Get the loaded config from app state."""
    return request.app.state.config
