# src/tripdesk/api/main.py
from __future__ import annotations

import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tripdesk.api.routes.auth import router as auth_router
from tripdesk.api.routes.resources import routers as resource_routers
from tripdesk.api.sessions import SessionStore
from tripdesk.data.seed import Catalog, default_catalog


def _parse_csv_list(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def _is_truthy(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


_DEFAULT_CORS_ORIGINS = [
    "http://127.0.0.1:3000",
    "http://localhost:3000",
]


def create_app(
    *,
    catalog: Catalog | None = None,
    session_store: SessionStore | None = None,
) -> FastAPI:
    """Build the API with its own catalog and session store."""

    app = FastAPI(title="tripdesk")
    app.state.catalog = catalog if catalog is not None else default_catalog()
    app.state.session_store = session_store if session_store is not None else SessionStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_parse_csv_list(os.getenv("TRIPDESK_CORS_ORIGINS")) or _DEFAULT_CORS_ORIGINS,
        allow_credentials=_is_truthy(os.getenv("TRIPDESK_CORS_ALLOW_CREDENTIALS")),
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.get("/status")
    def status():
        return {"ok": True}

    app.include_router(auth_router)
    for router in resource_routers:
        app.include_router(router)

    return app


app = create_app()
