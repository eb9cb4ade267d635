"""Application services: option formatting and source fetching."""

from app.application.services.option_formatter import (
    build_options,
    format_label,
    get_option_label,
    get_option_labels,
)
from app.application.services.source_fetcher import (
    SourceFetchResult,
    fetch_options,
    fetch_options_or_fallback,
)

__all__ = [
    "SourceFetchResult",
    "build_options",
    "fetch_options",
    "fetch_options_or_fallback",
    "format_label",
    "get_option_label",
    "get_option_labels",
]
