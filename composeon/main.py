from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.staticfiles import StaticFiles

from .config import configure_logging, get_settings
from .routers import api
from .store import CatalogStore


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings)
    store = CatalogStore.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):  # pragma: no cover - simple bootstrap hook
        store.rebuild()
        yield

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.catalog_store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    app.include_router(api.router)
    if settings.icons_dir.is_dir():
        app.mount("/icons", StaticFiles(directory=str(settings.icons_dir)), name="icons")

    return app


app = create_app()
