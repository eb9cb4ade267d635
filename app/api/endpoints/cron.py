"""Scheduled jobs invoked by an external scheduler (Vercel Cron, Cloud Scheduler, crontab).

The constants sync runs on CRON_SYNC_SCHEDULE (every 6 hours); the 30-minute
cache TTL covers the gaps between runs.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.dependencies import get_job_constants_cache, verify_cron_secret
from app.core.constants import CRON_SYNC_SCHEDULE
from app.infrastructure.cache import JobConstantsCacheProtocol
from app.schemas.constants import (
    ConstantsErrorResponse,
    RefreshResponse,
    UnauthorizedResponse,
)
from app.shared.utils.datetime import utc_now_iso

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/sync-constants",
    response_model=RefreshResponse,
    responses={
        401: {"model": UnauthorizedResponse},
        500: {"model": ConstantsErrorResponse},
    },
    dependencies=[Depends(verify_cron_secret)],
    description=f"Reset and repopulate the constants cache. Schedule: `{CRON_SYNC_SCHEDULE}`.",
)
async def sync_constants(
    cache: Annotated[JobConstantsCacheProtocol, Depends(get_job_constants_cache)],
) -> RefreshResponse | JSONResponse:
    """Reset and repopulate the job constants cache."""
    logger.info("Starting scheduled constants sync")
    try:
        await cache.refresh()
    except Exception:
        logger.exception("Failed to sync constants")
        return JSONResponse(
            status_code=500,
            content=ConstantsErrorResponse(
                error="Failed to sync constants", timestamp=utc_now_iso()
            ).model_dump(),
        )
    logger.info("Constants cache refreshed successfully")
    return RefreshResponse(
        message="Constants synced successfully",
        timestamp=utc_now_iso(),
    )
