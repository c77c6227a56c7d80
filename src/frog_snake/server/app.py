"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from frog_snake.errors import ConfigurationError
from frog_snake.server.routes import router
from frog_snake.server.session_manager import SessionManager
from frog_snake.server.websocket import ws_router

STATIC_DIR = Path(__file__).parent / "static"


@asynccontextmanager
async def _lifespan(app: FastAPI):
    app.state.session_manager = SessionManager()
    yield
    await app.state.session_manager.cleanup()


def create_app(static_dir: str | Path | None = None) -> FastAPI:
    """Build and return the FastAPI application.

    Raises :class:`ConfigurationError` if the page that hosts the game
    board cannot be found in *static_dir*.
    """
    page = Path(static_dir if static_dir is not None else STATIC_DIR) / "index.html"
    if not page.is_file():
        raise ConfigurationError(f"Game page not found at {page}.")
    html = page.read_text(encoding="utf-8")

    app = FastAPI(
        title="Frog Snake", version="0.1.0", lifespan=_lifespan,
    )

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def index() -> str:
        return html

    app.include_router(router)
    app.include_router(ws_router)
    return app
