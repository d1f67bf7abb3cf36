# hexdirectory/services/api/app.py
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hexdirectory.common.logging import get_logger
from hexdirectory.common.settings import get_settings
from hexdirectory.services.api.routers import health, people

cfg = get_settings()


def create_app() -> FastAPI:
    get_logger(level=cfg.log_level)

    app = FastAPI(
        title="Hexdirectory API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )

    allow_origins = ["*"] if cfg.is_dev else cfg.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    # Routers
    app.include_router(health.router)
    app.include_router(people.router)
    return app

app = create_app()
