# -*- coding: utf-8 -*-
"""
Ayurwell API

Prakriti assessment, dosha profile and food dosha-balance analytics.
"""

from __future__ import annotations

import logging
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .analytics.api import router as analytics_router
from .app_db import init_app_db
from .config import settings
from .prakriti.api import router as prakriti_router

app = FastAPI(
    title="Ayurwell",
    description="Prakriti assessment and dosha analytics",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def _startup_init_db() -> None:
    init_app_db(settings.app_db_path)


# Ensure the app DB exists even when lifespan events are not triggered (e.g. some test clients).
init_app_db(settings.app_db_path)

app.include_router(prakriti_router)
app.include_router(analytics_router)


@app.get("/api/health")
def health_check():
    """Liveness probe"""
    return {
        "status": "ok",
        "version": __version__,
        "timestamp": datetime.now().isoformat(),
    }


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("ayurwell.api:app", host=settings.host, port=settings.port, reload=False)


if __name__ == "__main__":
    run()
