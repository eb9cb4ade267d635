"""Domain value objects for the job board.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from app.domain.enums import ConstantCategory


@dataclass(frozen=True)
class Option:
    """One selectable enumeration member: machine value plus display label.

    value is the raw key as stored in the jobs table; label is the
    human-readable form shown in filters and profile forms.
    """

    value: str
    label: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Option value must be a non-empty string")

    def to_dict(self) -> dict[str, str]:
        return {"value": self.value, "label": self.label}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Option":
        """Build from a {value, label} mapping. Raises ValueError when malformed."""
        try:
            value = data["value"]
            label = data["label"]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid option payload: {data!r}") from e
        if not isinstance(value, str) or not isinstance(label, str):
            raise ValueError(f"Option value and label must be strings: {data!r}")
        return cls(value=value, label=label)


def _options_from_list(raw: Any, key: str) -> tuple[Option, ...]:
    if not isinstance(raw, list):
        raise ValueError(f"Constants payload field {key!r} must be a list")
    return tuple(Option.from_dict(item) for item in raw)


@dataclass(frozen=True)
class JobConstants:
    """All four constant categories together (the composite payload).

    Serialized with camelCase keys: jobRoles, primaryProducts, jobTypes, countries.
    """

    job_roles: tuple[Option, ...]
    primary_products: tuple[Option, ...]
    job_types: tuple[Option, ...]
    countries: tuple[Option, ...]

    @classmethod
    def from_categories(
        cls, options: Mapping[ConstantCategory, Iterable[Option]]
    ) -> "JobConstants":
        """Build from a category -> options mapping covering every category."""
        return cls(
            job_roles=tuple(options[ConstantCategory.JOB_ROLES]),
            primary_products=tuple(options[ConstantCategory.PRIMARY_PRODUCTS]),
            job_types=tuple(options[ConstantCategory.JOB_TYPES]),
            countries=tuple(options[ConstantCategory.COUNTRIES]),
        )

    def for_category(self, category: ConstantCategory) -> tuple[Option, ...]:
        """Return the options of one category."""
        return getattr(self, category.value)

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        """Serialize to the camelCase JSON payload shape."""
        return {
            category.payload_key: [o.to_dict() for o in self.for_category(category)]
            for category in ConstantCategory
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "JobConstants":
        """Parse the camelCase JSON payload. Raises ValueError when malformed."""
        if not isinstance(data, Mapping):
            raise ValueError("Constants payload must be an object")
        parsed: dict[ConstantCategory, tuple[Option, ...]] = {}
        for category in ConstantCategory:
            key = category.payload_key
            if key not in data:
                raise ValueError(f"Constants payload is missing {key!r}")
            parsed[category] = _options_from_list(data[key], key)
        return cls.from_categories(parsed)
