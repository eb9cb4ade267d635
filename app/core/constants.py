"""Core constants: cache timing and shared literal values."""

# Default freshness window for both cache tiers (30 minutes).
CACHE_TTL_SECONDS = 30 * 60

# Reference deployment schedules the cron sync every 6 hours ("0 */6 * * *").
CRON_SYNC_SCHEDULE = "0 */6 * * *"

CONSTANTS_ENDPOINT = "/api/constants"
