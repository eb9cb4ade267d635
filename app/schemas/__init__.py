"""Pydantic request/response schemas for the API."""

from app.schemas.constants import (
    CategoryOptionsResponse,
    ConstantsErrorResponse,
    ConstantsResponse,
    JobConstantsSchema,
    OptionSchema,
    RefreshResponse,
    UnauthorizedResponse,
)
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

__all__ = [
    "CategoryOptionsResponse",
    "ConstantsErrorResponse",
    "ConstantsResponse",
    "HealthResponse",
    "JobConstantsSchema",
    "OptionSchema",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "RefreshResponse",
    "UnauthorizedResponse",
]
