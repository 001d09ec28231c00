from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError

from src.config.settings import Settings, get_settings
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import animal, breed  # noqa: F401
from src.infrastructure.db.session import create_engine, create_session_factory
from src.interfaces.http.routers import animals, breeds, health
from src.interfaces.http.views import create_templates
from src.interfaces.middleware.error_handler import register_error_handlers

logger = logging.getLogger(__name__)


async def ensure_schema(app: FastAPI) -> None:
    """Create missing tables; failures are logged and the app keeps serving."""
    try:
        async with app.state.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except SQLAlchemyError:
        logger.exception("Database schema creation failed")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.settings.create_schema_on_startup:
        await ensure_schema(app)
    try:
        yield
    finally:
        engine = getattr(app.state, "engine", None)
        if engine is not None:
            await engine.dispose()


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    # Avoid adding duplicate handlers on reload
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine"):
        logging.getLogger(name).setLevel(level)


def create_app(*, settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings.log_level)
    app = FastAPI(
        title=settings.app_title,
        version="0.1.0",
        description="Server-rendered catalog of animals and their breeds",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = create_engine(settings.database_url, echo=settings.db_echo)
    app.state.session_factory = create_session_factory(app.state.engine)
    app.state.templates = create_templates()
    register_error_handlers(app)

    @app.get("/", include_in_schema=False)
    async def root() -> RedirectResponse:
        return RedirectResponse(animals.LIST_URL)

    app.include_router(health.router)
    app.include_router(animals.router)
    app.include_router(breeds.router)
    return app


app = create_app()
