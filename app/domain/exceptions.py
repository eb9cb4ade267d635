"""Domain exceptions for the job board constants service.

Defines domain-level exceptions that represent failures and rule
violations. These exceptions are independent of infrastructure concerns.
Presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class JobBoardException(Exception):
    """Base exception for all job board application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, category).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(JobBoardException):
    """Raised when input validation fails (e.g. unknown category)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(JobBoardException):
    """Raised when authentication fails (e.g. missing or wrong cron secret)."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class SourceFetchError(JobBoardException):
    """Raised (or carried in a fetch result) when the jobs table cannot be read.

    The source fetcher never lets this escape to cache callers; it is
    mapped to curated fallback data at the cache boundary.
    """

    def __init__(self, category: str, reason: str) -> None:
        """Initialize with the category being fetched and the failure reason.

        Args:
            category: Constant category value (e.g. 'job_roles').
            reason: Short description of the underlying error.
        """
        super().__init__(
            f"Failed to fetch {category} from source: {reason}",
            "SOURCE_FETCH_ERROR",
            {"category": category},
        )


class SqlNotConfiguredException(JobBoardException):
    """Raised when an operation requires Postgres but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
