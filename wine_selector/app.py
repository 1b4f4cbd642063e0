from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from pydantic import ValidationError
from starlette.middleware.sessions import SessionMiddleware

from .catalog.data_store import get_catalog, get_collections
from .catalog.options import OPTIONS
from .config import DEFAULT_APP_CONFIG
from .recommendations.matching import evaluate
from .recommendations.models import (
    RecommendationResult,
    Selection,
    SelectionRequest,
    ToggleRequest,
    Wine,
)
from .recommendations.session import SelectionSession

logger = logging.getLogger(__name__)

app = FastAPI(title=DEFAULT_APP_CONFIG.title, version=DEFAULT_APP_CONFIG.version)
app.add_middleware(SessionMiddleware, secret_key=DEFAULT_APP_CONFIG.session_secret)

_SESSION_KEY = DEFAULT_APP_CONFIG.session_key


def _load_session(request: Request) -> SelectionSession:
    raw = request.session.get(_SESSION_KEY)
    try:
        selection = Selection.model_validate(raw) if raw else Selection()
    except ValidationError:
        logger.warning("Discarding unreadable selection in session", exc_info=True)
        selection = Selection()
    return SelectionSession(get_catalog(), selection)


def _save_session(request: Request, session: SelectionSession) -> None:
    request.session[_SESSION_KEY] = session.selection.model_dump(mode="json")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return {
        "options": {category: list(tags) for category, tags in OPTIONS.items()},
        "collections": get_collections(),
    }


@app.get("/wines", response_model=list[Wine])
def wines() -> list[Wine]:
    return list(get_catalog())


@app.post("/recommendations", response_model=RecommendationResult)
def recommendations(body: SelectionRequest) -> RecommendationResult:
    return evaluate(get_catalog(), body.to_selection())


# ── Session selection ────────────────────────────────────────────────────


@app.get("/selection", response_model=RecommendationResult)
def current_selection(request: Request) -> RecommendationResult:
    return _load_session(request).current()


@app.post("/selection/toggle", response_model=RecommendationResult)
def toggle_tag(body: ToggleRequest, request: Request) -> RecommendationResult:
    session = _load_session(request)
    result = session.toggle(body.category, body.tag)
    _save_session(request, session)
    return result


@app.post("/selection/reset", response_model=RecommendationResult)
def reset(request: Request) -> RecommendationResult:
    session = _load_session(request)
    result = session.reset()
    _save_session(request, session)
    return result
