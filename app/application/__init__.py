"""Application layer: interfaces and services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, cache, clients).
"""

from app.application.interfaces import IDistinctValueSource
from app.application.services.source_fetcher import (
    SourceFetchResult,
    fetch_options,
    fetch_options_or_fallback,
)

__all__ = [
    "IDistinctValueSource",
    "SourceFetchResult",
    "fetch_options",
    "fetch_options_or_fallback",
]
