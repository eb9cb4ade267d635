"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (constants cache, telemetry,
DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.api.dependencies import build_job_constants_cache
from app.core.config import get_settings
from app.infrastructure.persistence import database
from app.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, job constants cache, telemetry (if enabled).
    Shutdown order: cache clear, telemetry shutdown, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()

    app.state.job_constants_cache = build_job_constants_cache(settings)
    if database.engine is None:
        logger.warning(
            "DATABASE_URL not set; job constants will be served from fallback data"
        )
    logger.info(
        "Job constants cache ready (ttl=%ss, table=%s)",
        settings.constants_cache_ttl_seconds,
        settings.jobs_table,
    )

    if settings.telemetry_enabled:
        from app.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        if database.engine is not None:
            telemetry.instrument_sqlalchemy(database.engine)
        logger.info("Telemetry initialized")

    yield

    # ---- Shutdown ----
    cache = getattr(app.state, "job_constants_cache", None)
    if cache is not None:
        cache.clear()
        app.state.job_constants_cache = None

    from app.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
        logger.info("Telemetry shutdown complete")

    await database.dispose_engine()
