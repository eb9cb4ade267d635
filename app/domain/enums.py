"""Domain enumerations for the job board.

Enums represent fixed sets of domain values (e.g. constant categories).
"""

from enum import Enum


class ConstantCategory(str, Enum):
    """Kind of job constant derived from the jobs table.

    Each category is backed by one column of the jobs table and is exposed
    under a camelCase key in the constants payload.
    """

    JOB_ROLES = "job_roles"
    PRIMARY_PRODUCTS = "primary_products"
    JOB_TYPES = "job_types"
    COUNTRIES = "countries"

    @property
    def column(self) -> str:
        """Column of the jobs table holding this category's raw values."""
        return _CATEGORY_COLUMNS[self]

    @property
    def payload_key(self) -> str:
        """Key used for this category in the JSON constants payload."""
        return _CATEGORY_PAYLOAD_KEYS[self]

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid category values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [category.value for category in cls]


_CATEGORY_COLUMNS: dict[ConstantCategory, str] = {
    ConstantCategory.JOB_ROLES: "job_role",
    ConstantCategory.PRIMARY_PRODUCTS: "primary_product",
    ConstantCategory.JOB_TYPES: "job_type",
    ConstantCategory.COUNTRIES: "location_country",
}

_CATEGORY_PAYLOAD_KEYS: dict[ConstantCategory, str] = {
    ConstantCategory.JOB_ROLES: "jobRoles",
    ConstantCategory.PRIMARY_PRODUCTS: "primaryProducts",
    ConstantCategory.JOB_TYPES: "jobTypes",
    ConstantCategory.COUNTRIES: "countries",
}
