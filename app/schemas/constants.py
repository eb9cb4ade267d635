"""Job constants API schemas.

Field names are snake_case in Python and camelCase on the wire
(jobRoles, primaryProducts, jobTypes, countries).
"""

from pydantic import BaseModel, ConfigDict, Field

from app.domain.value_objects import JobConstants, Option


class OptionSchema(BaseModel):
    """One selectable option."""

    value: str = Field(..., description="Raw value as stored in the jobs table")
    label: str = Field(..., description="Display label")

    @classmethod
    def from_domain(cls, option: Option) -> "OptionSchema":
        return cls(value=option.value, label=option.label)


def _schemas(options: tuple[Option, ...]) -> list[OptionSchema]:
    return [OptionSchema.from_domain(o) for o in options]


class JobConstantsSchema(BaseModel):
    """All four constant categories."""

    model_config = ConfigDict(populate_by_name=True)

    job_roles: list[OptionSchema] = Field(..., alias="jobRoles")
    primary_products: list[OptionSchema] = Field(..., alias="primaryProducts")
    job_types: list[OptionSchema] = Field(..., alias="jobTypes")
    countries: list[OptionSchema] = Field(..., alias="countries")

    @classmethod
    def from_domain(cls, constants: JobConstants) -> "JobConstantsSchema":
        return cls(
            job_roles=_schemas(constants.job_roles),
            primary_products=_schemas(constants.primary_products),
            job_types=_schemas(constants.job_types),
            countries=_schemas(constants.countries),
        )


class ConstantsResponse(BaseModel):
    """Response for GET /constants."""

    success: bool = True
    data: JobConstantsSchema
    timestamp: str = Field(..., description="ISO 8601 UTC time the response was built")


class CategoryOptionsResponse(BaseModel):
    """Response for GET /constants/{category}."""

    success: bool = True
    category: str
    data: list[OptionSchema]
    timestamp: str


class RefreshResponse(BaseModel):
    """Response for POST /constants and GET /cron/sync-constants."""

    success: bool = True
    message: str
    timestamp: str


class ConstantsErrorResponse(BaseModel):
    """500 body when constants could not be served or refreshed."""

    success: bool = False
    error: str
    timestamp: str | None = None


class UnauthorizedResponse(BaseModel):
    """401 body for cron requests without a valid bearer secret."""

    error: str = "Unauthorized"
