"""Domain layer: value objects, enums, fallback data, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import ConstantCategory
from app.domain.exceptions import (
    AuthenticationException,
    JobBoardException,
    SourceFetchError,
    SqlNotConfiguredException,
    ValidationException,
)
from app.domain.value_objects import JobConstants, Option

__all__ = [
    # Enums
    "ConstantCategory",
    # Exceptions
    "AuthenticationException",
    "JobBoardException",
    "SourceFetchError",
    "SqlNotConfiguredException",
    "ValidationException",
    # Value objects
    "JobConstants",
    "Option",
]
