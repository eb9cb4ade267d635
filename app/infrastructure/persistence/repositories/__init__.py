"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.job_constants_repo import (
    JobConstantsRepository,
)

__all__ = ["JobConstantsRepository"]
