# FastAPI adapter exposing one local game session to a browser tab.
# Provides:
# - GET  /api/state: board, keyboard classification, hints, points and streak
# - POST /api/guess: submit a guess
# - POST /api/hint: buy a letter hint
# - POST /api/new-game: start the next game (force=true abandons a running one)
# - POST /api/reveal: reveal answer when game over
# - GET  /api/score: points and streak
# - POST /api/score/reset: clear saved points and streak
# - GET  /api/words: word list size (the list itself is not exposed)
#
# Run: uvicorn wordguess.main:app --host 127.0.0.1 --port 8000

from __future__ import annotations
import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import Optional
from .config import CORS_ORIGINS, LOG_LEVEL, WORDS_PATH
from .db import KeyValueStore
from .errors import GameError, GameInProgress, NotReady
from .game import GameSession
from .models import (
    ErrorResponse, GuessRequest, GuessResult, HintResult, NewGameRequest, ScoreView,
    SessionView,
)
from .scoring import ScoreKeeper
from .words import load_word_bank, read_word_source

log = logging.getLogger(__name__)

_STATUS = {
    NotReady: 503,
    GameInProgress: 409,
}

_ERRORS = {
    400: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_app(store: Optional[KeyValueStore] = None, words_path=WORDS_PATH) -> FastAPI:
    store = store or KeyValueStore()

    app = FastAPI(title="Word Guess", version="1.0.0")
    app.state.store = store
    app.state.session = None

    def current() -> GameSession:
        session = app.state.session
        if session is None:
            raise NotReady()
        return session

    # CORS for dev convenience
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    # Load the word list on startup; requests before then get 503
    @app.on_event("startup")
    def startup():
        configure_logging()
        store.init()
        session = GameSession(score=ScoreKeeper(store))
        app.state.session = session
        session.attach_bank(load_word_bank(read_word_source(words_path)))

    @app.exception_handler(GameError)
    def game_error_handler(request: Request, exc: GameError):
        status = _STATUS.get(type(exc), 400)
        log.debug("%s %s -> %s", request.method, request.url.path, exc.code)
        body = ErrorResponse(error=exc.code, detail=str(exc))
        return JSONResponse(status_code=status, content=body.model_dump())

    @app.get("/api/state", response_model=SessionView, responses=_ERRORS)
    def api_state():
        return current().view()

    @app.post("/api/guess", response_model=GuessResult, responses=_ERRORS)
    def api_guess(req: GuessRequest):
        return current().submit_guess(req.guess)

    @app.post("/api/hint", response_model=HintResult, responses=_ERRORS)
    def api_hint():
        return current().buy_hint()

    @app.post("/api/new-game", response_model=SessionView, responses=_ERRORS)
    def api_new_game(req: Optional[NewGameRequest] = None):
        return current().new_game(force=bool(req and req.force))

    @app.post("/api/reveal", responses=_ERRORS)
    def api_reveal():
        return {"answer": current().reveal()}

    @app.get("/api/score", response_model=ScoreView, responses=_ERRORS)
    def api_score():
        return current().score.snapshot()

    @app.post("/api/score/reset", response_model=ScoreView, responses=_ERRORS)
    def api_score_reset():
        return current().reset_score()

    @app.get("/api/words", responses=_ERRORS)
    def api_words():
        bank = current().bank
        if bank is None:
            raise NotReady()
        return {"count": len(bank), "degraded": bank.degraded}

    return app


app = create_app()
