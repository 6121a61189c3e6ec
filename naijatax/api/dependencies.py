from __future__ import annotations

from fastapi import Request

from naijatax.services.history import SessionStore


def get_session_store(request: Request) -> SessionStore:
    """The single in-memory session owned by the running app."""
    return request.app.state.session_store
