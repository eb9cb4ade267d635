"""Source fetcher: derive option lists for a category from the jobs table.

fetch_options returns an explicit result (options or error) and never
raises. fetch_options_or_fallback is the cache-boundary adapter that maps
an error or an empty result to the curated fallback list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from app.application.interfaces.repositories import IDistinctValueSource
from app.application.services.option_formatter import build_options
from app.domain.enums import ConstantCategory
from app.domain.exceptions import SourceFetchError
from app.domain.fallback_options import fallback_options
from app.domain.value_objects import Option
from app.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceFetchResult:
    """Outcome of one source query: options on success, error otherwise."""

    options: tuple[Option, ...] = ()
    error: SourceFetchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@traced("constants.fetch_options")
async def fetch_options(
    source: IDistinctValueSource, category: ConstantCategory
) -> SourceFetchResult:
    """Query distinct non-null values of the category column and build options.

    Any exception raised by the source or while building options is
    captured in the result; the options may be empty when the table has
    no usable values.
    """
    add_span_attributes(**{"constants.category": category.value})
    try:
        raw_values = await source.distinct_values(category.column)
        options = build_options(category, raw_values)
    except Exception as e:
        return SourceFetchResult(error=SourceFetchError(category.value, str(e) or type(e).__name__))
    add_span_attributes(**{"constants.option_count": len(options)})
    return SourceFetchResult(options=options)


async def fetch_options_or_fallback(
    source: IDistinctValueSource, category: ConstantCategory
) -> tuple[Option, ...]:
    """Return live options for category, or the curated fallback on error/empty."""
    result = await fetch_options(source, category)
    if not result.ok:
        logger.warning(
            "Failed to fetch %s from database, using fallback: %s",
            category.value,
            result.error.message if result.error else "unknown error",
        )
        return fallback_options(category)
    if not result.options:
        logger.warning("No %s found in database, using fallback", category.value)
        return fallback_options(category)
    return result.options
