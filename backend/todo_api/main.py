"""Todo API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure → the response envelope
    - CORS configured from settings (not hardcoded)
    - TodoRest built in create_app(), before any request is served

Design Decisions:
    - create_app() factory: tests build isolated apps with a fake controller;
      the module-level `app` serves `uvicorn todo_api.main:app`
    - Lifespan over @app.on_event for logging setup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_api import __version__
from todo_api.api.error_handlers import register_error_handlers
from todo_api.api.routes import health, todo
from todo_api.config import Settings, get_settings
from todo_api.core.controller_protocols import TodoController
from todo_api.infrastructure.observability import setup_logging
from todo_api.services.todo_controller import build_controller

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = app.state.todo_rest.cnfg
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"{settings.app_name} started")
    yield
    logger.info(f"{settings.app_name} shutting down")


def create_app(
    settings: Settings | None = None,
    controller: TodoController | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.app_name, version=__version__, lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(todo.router)
    todo.init_todo_rest(app, settings, controller or build_controller(settings))

    register_error_handlers(app)
    return app


app = create_app()
