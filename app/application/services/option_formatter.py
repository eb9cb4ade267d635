"""Turn raw column values into display options.

Shared by the source fetcher (live cache population) and the build-time
constants generator so both derive identical labels.
"""

from collections.abc import Iterable

from app.domain.enums import ConstantCategory
from app.domain.value_objects import Option


def _capitalize_first(word: str) -> str:
    """Uppercase the first character only; the rest is kept as-is."""
    return word[:1].upper() + word[1:]


def format_snake_case_label(value: str) -> str:
    """'solution_architect' -> 'Solution Architect'."""
    return " ".join(_capitalize_first(word) for word in value.split("_"))


def format_label(category: ConstantCategory, value: str) -> str:
    """Return the display label for a raw value of the given category.

    job_roles and primary_products: split on underscores and capitalize each word.
    job_types: capitalize the first character ('full-time' -> 'Full-time').
    countries: verbatim ('US' stays 'US').
    """
    if category in (ConstantCategory.JOB_ROLES, ConstantCategory.PRIMARY_PRODUCTS):
        return format_snake_case_label(value)
    if category == ConstantCategory.JOB_TYPES:
        return _capitalize_first(value)
    return value


def unique_values(raw_values: Iterable[object]) -> list[str]:
    """Deduplicate preserving first-seen order and drop empty/None values."""
    seen: set[str] = set()
    result: list[str] = []
    for raw in raw_values:
        if not raw:
            continue
        value = str(raw)
        if value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result


def build_options(
    category: ConstantCategory, raw_values: Iterable[object]
) -> tuple[Option, ...]:
    """Deduplicate raw column values and map each to an Option.

    Deterministic: the same raw rows always produce the same options in
    the same order.
    """
    return tuple(
        Option(value=value, label=format_label(category, value))
        for value in unique_values(raw_values)
    )


def get_option_label(options: Iterable[Option], value: str) -> str:
    """Return the label for value, or value itself when it is not listed."""
    for option in options:
        if option.value == value:
            return option.label
    return value


def get_option_labels(options: Iterable[Option], values: Iterable[str]) -> list[str]:
    """Map several values to labels (unknown values pass through)."""
    lookup = {option.value: option.label for option in options}
    return [lookup.get(value, value) for value in values]
