"""xpd-slash API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map XpdError → structured JSON responses
    - AppState (settings, verify key, DB manager, follow-up notifier) built once on startup
    - Shared clients closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Public key parsed at startup: a misconfigured key fails the deploy, not the first request
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from xpd_slash.api.error_handlers import register_error_handlers
from xpd_slash.api.routes import health, interactions
from xpd_slash.config import get_settings
from xpd_slash.core.verify_signature import load_verify_key
from xpd_slash.infrastructure.database import DatabaseSessionManager
from xpd_slash.infrastructure.discord_client import FollowupNotifier
from xpd_slash.infrastructure.observability import setup_logging
from xpd_slash.state import AppState

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    http_client = httpx.AsyncClient(timeout=settings.followup_timeout_seconds)
    app.state.xpd = AppState(
        settings=settings,
        verify_key=load_verify_key(settings.discord_public_key),
        db=db,
        notifier=FollowupNotifier(
            http_client,
            settings.discord_application_id,
            settings.discord_api_base,
        ),
    )
    logger.info("xpd-slash API started")
    yield
    logger.info("xpd-slash API shutting down")
    await http_client.aclose()
    await db.dispose()


app = FastAPI(
    title="xpd-slash API", version="0.1.0", lifespan=lifespan,
)

register_error_handlers(app)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(interactions.router)
