"""Tests for domain exceptions and their JSON error bodies."""

from app.domain.exceptions import (
    AuthenticationException,
    JobBoardException,
    SourceFetchError,
    SqlNotConfiguredException,
    ValidationException,
)


def test_base_defaults_error_code_to_class_name() -> None:
    exc = JobBoardException("something failed")
    assert exc.error_code == "JobBoardException"
    assert exc.to_dict() == {
        "error": "JobBoardException",
        "message": "something failed",
        "details": {},
    }


def test_validation_exception_carries_field() -> None:
    exc = ValidationException("bad column", field="column")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "column"}


def test_authentication_exception_default_message() -> None:
    exc = AuthenticationException()
    assert exc.message == "Unauthorized"
    assert isinstance(exc, JobBoardException)


def test_source_fetch_error() -> None:
    exc = SourceFetchError("job_roles", "timeout")
    assert exc.message == "Failed to fetch job_roles from source: timeout"
    assert exc.to_dict()["details"] == {"category": "job_roles"}


def test_sql_not_configured() -> None:
    assert SqlNotConfiguredException().error_code == "SERVICE_UNAVAILABLE"
