"""Core: config, constants, and application bootstrap.

Single place for settings and shared constants.
"""

from app.core.config import Settings, get_settings
from app.core.constants import CACHE_TTL_SECONDS, CONSTANTS_ENDPOINT

__all__ = ["CACHE_TTL_SECONDS", "CONSTANTS_ENDPOINT", "Settings", "get_settings"]
