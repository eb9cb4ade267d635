"""Job constants API: read the cached constants and force a refresh."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.api.dependencies import get_job_constants_cache
from app.core.limiter import limit_refresh
from app.domain.enums import ConstantCategory
from app.infrastructure.cache import JobConstantsCacheProtocol
from app.schemas.constants import (
    CategoryOptionsResponse,
    ConstantsErrorResponse,
    ConstantsResponse,
    JobConstantsSchema,
    OptionSchema,
    RefreshResponse,
)
from app.shared.utils.datetime import utc_now_iso

logger = logging.getLogger(__name__)

router = APIRouter()

CacheDep = Annotated[JobConstantsCacheProtocol, Depends(get_job_constants_cache)]


def _error_response(error: str) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content=ConstantsErrorResponse(error=error).model_dump(exclude_none=True),
    )


@router.get(
    "",
    response_model=ConstantsResponse,
    responses={500: {"model": ConstantsErrorResponse}},
)
async def get_constants(cache: CacheDep) -> ConstantsResponse | JSONResponse:
    """Return job roles, primary products, job types, and countries."""
    try:
        constants = await cache.get_all()
    except Exception:
        logger.exception("Failed to fetch job constants")
        return _error_response("Failed to fetch constants")
    return ConstantsResponse(
        data=JobConstantsSchema.from_domain(constants),
        timestamp=utc_now_iso(),
    )


@router.post(
    "",
    response_model=RefreshResponse,
    responses={500: {"model": ConstantsErrorResponse}},
)
@limit_refresh
async def refresh_constants(
    request: Request, cache: CacheDep
) -> RefreshResponse | JSONResponse:
    """Force a cache refresh (administrative)."""
    try:
        await cache.refresh()
    except Exception:
        logger.exception("Failed to refresh job constants cache")
        return _error_response("Failed to refresh cache")
    return RefreshResponse(
        message="Cache refreshed successfully",
        timestamp=utc_now_iso(),
    )


@router.get(
    "/{category}",
    response_model=CategoryOptionsResponse,
    responses={500: {"model": ConstantsErrorResponse}},
)
async def get_category_constants(
    category: ConstantCategory, cache: CacheDep
) -> CategoryOptionsResponse | JSONResponse:
    """Return the options of one category (e.g. /constants/job_types)."""
    try:
        options = await cache.get(category)
    except Exception:
        logger.exception("Failed to fetch %s", category.value)
        return _error_response("Failed to fetch constants")
    return CategoryOptionsResponse(
        category=category.value,
        data=[OptionSchema.from_domain(o) for o in options],
        timestamp=utc_now_iso(),
    )
