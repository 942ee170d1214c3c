"""
Application factory for the creditbook web app.

Run with: uvicorn creditbook.app:create_app --factory
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates
from starlette.middleware.base import BaseHTTPMiddleware

from creditbook.core.config import Settings, get_settings
from creditbook.repositories import build_storage
from creditbook.routers import api as api_router
from creditbook.routers import people as people_router
from creditbook.services.ledger_service import LedgerService

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (CSP, anti clickjacking, referrer policy)."""

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault(
            "Content-Security-Policy",
            "default-src 'self'; style-src 'self' 'unsafe-inline'; script-src 'self' 'unsafe-inline'; form-action 'self'",
        )
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "same-origin")
        return response


def create_app(settings: Settings | None = None, storage=None, ledger: LedgerService | None = None) -> FastAPI:
    """Build the app with an explicitly owned LedgerService on app.state.ledger."""
    settings = settings or get_settings()
    if ledger is None:
        ledger = LedgerService(
            storage if storage is not None else build_storage(settings),
            people_key=settings.people_key,
            events_key=settings.events_key,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # final persist at session end
        app.state.ledger.close()
        print("[ledger] Estado salvo no encerramento.")

    app = FastAPI(title="Creditbook", lifespan=lifespan)
    app.add_middleware(SecurityHeadersMiddleware)
    app.state.settings = settings
    app.state.ledger = ledger
    app.state.templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

    app.include_router(api_router.router)
    app.include_router(people_router.router)
    return app
