"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Limit strings live here.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

# Manual refresh resets the cache and hits the jobs table four times.
REFRESH_LIMIT = "10/minute"

limit_refresh = limiter.limit(REFRESH_LIMIT)
