"""
Dependency wiring for the FastAPI app.

The store handle is built once by `create_app` and kept on application
state; handlers receive it through these dependencies.
"""

from __future__ import annotations

from fastapi import Request

from quickex.store import SupabaseStore


def get_store(request: Request) -> SupabaseStore:
    """Return the store handle built at startup."""
    return request.app.state.store
