import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gmgn_server import __version__
from gmgn_server.core.config import Settings, get_settings
from gmgn_server.core.container import build_container
from gmgn_server.core.errors import register_exception_handlers
from gmgn_server.core.logging import configure_logging
from gmgn_server.interfaces.http import create_api_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await app.state.container.shutdown()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        description="Paper-trading backend for the GMGN clone",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.state.container = build_container(settings)
    app.state.started_at = time.monotonic()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(create_api_router(settings.api_prefix))
    return app


app = create_app()
