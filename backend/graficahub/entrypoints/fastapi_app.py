# graficahub/entrypoints/fastapi_app.py
from __future__ import annotations

from fastapi import FastAPI

from .api.routers import health, ranking


def create_app() -> FastAPI:
    app = FastAPI(title="GraficaHub - Proposal Ranking")

    # Routers
    app.include_router(health.router)
    app.include_router(ranking.router)

    return app


app = create_app()
