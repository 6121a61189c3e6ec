from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from naijatax.api.dependencies import get_session_store
from naijatax.services.history import (
    SessionState,
    SessionStore,
    set_language,
    toggle_language,
    toggle_theme,
)
from naijatax.services.localization import translate

router = APIRouter(prefix="/session", tags=["session"])


class LanguageUpdate(BaseModel):
    language: str


class SessionOut(BaseModel):
    language: str
    dark_mode: bool
    theme_toggle_label: str
    history_count: int
    title: str


def _session_out(state: SessionState) -> dict:
    toggle_key = "light_mode" if state.dark_mode else "dark_mode"
    return {
        "language": state.language,
        "dark_mode": state.dark_mode,
        "theme_toggle_label": translate(toggle_key, state.language),
        "history_count": len(state.history),
        "title": translate("title", state.language),
    }


@router.get("", response_model=SessionOut)
async def get_session(store: SessionStore = Depends(get_session_store)):
    return _session_out(store.state)


@router.post("/language", response_model=SessionOut)
async def update_language(payload: LanguageUpdate, store: SessionStore = Depends(get_session_store)):
    """Switch display language (en or pg). Calculations are unaffected."""
    return _session_out(store.apply(set_language, payload.language))


@router.post("/language/toggle", response_model=SessionOut)
async def switch_language(store: SessionStore = Depends(get_session_store)):
    return _session_out(store.apply(toggle_language))


@router.post("/theme/toggle", response_model=SessionOut)
async def switch_theme(store: SessionStore = Depends(get_session_store)):
    return _session_out(store.apply(toggle_theme))
