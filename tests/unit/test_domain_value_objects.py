"""Tests for domain value objects (Option, JobConstants) and categories."""

import pytest

from app.domain.enums import ConstantCategory
from app.domain.fallback_options import fallback_job_constants
from app.domain.value_objects.core import JobConstants, Option


class TestConstantCategory:
    def test_columns_and_payload_keys(self) -> None:
        assert ConstantCategory.JOB_ROLES.column == "job_role"
        assert ConstantCategory.COUNTRIES.column == "location_country"
        assert ConstantCategory.PRIMARY_PRODUCTS.payload_key == "primaryProducts"
        assert ConstantCategory.values() == [
            "job_roles",
            "primary_products",
            "job_types",
            "countries",
        ]


class TestOption:
    """Option: non-empty value with a display label."""

    def test_empty_value_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            Option(value="", label="Empty")

    def test_from_dict(self) -> None:
        assert Option.from_dict({"value": "US", "label": "United States"}) == Option(
            value="US", label="United States"
        )

    def test_from_dict_missing_label(self) -> None:
        with pytest.raises(ValueError, match="Invalid option"):
            Option.from_dict({"value": "US"})

    def test_from_dict_non_string(self) -> None:
        with pytest.raises(ValueError, match="strings"):
            Option.from_dict({"value": 1, "label": "One"})


class TestJobConstants:
    def test_to_dict_uses_camel_case_keys(self) -> None:
        payload = fallback_job_constants().to_dict()
        assert list(payload) == ["jobRoles", "primaryProducts", "jobTypes", "countries"]
        assert {"value": "US", "label": "United States"} in payload["countries"]

    def test_from_dict_parses_payload(self) -> None:
        payload = fallback_job_constants().to_dict()
        assert JobConstants.from_dict(payload) == fallback_job_constants()

    def test_from_dict_missing_category(self) -> None:
        payload = fallback_job_constants().to_dict()
        del payload["jobTypes"]
        with pytest.raises(ValueError, match="jobTypes"):
            JobConstants.from_dict(payload)

    def test_from_dict_rejects_non_object(self) -> None:
        with pytest.raises(ValueError, match="object"):
            JobConstants.from_dict(None)

    def test_for_category(self) -> None:
        constants = fallback_job_constants()
        assert constants.for_category(ConstantCategory.JOB_TYPES) == constants.job_types

    def test_fallback_sizes(self) -> None:
        constants = fallback_job_constants()
        assert len(constants.job_roles) == 19
        assert len(constants.primary_products) == 27
        assert len(constants.job_types) == 5
        assert len(constants.countries) == 10
