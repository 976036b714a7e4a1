from __future__ import annotations

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from resumefit.core.config import settings


def client_key(request: Request) -> str:
    """Callers with an API key share one bucket per key; everyone else is keyed by IP."""
    api_key = (request.headers.get("X-API-Key") or "").strip()
    if api_key:
        return f"key:{api_key}"
    return f"ip:{get_remote_address(request)}"


limiter = Limiter(key_func=client_key)


def rate_limit(limit: str | None = None):
    """Route decorator applying ``limit`` (default RATE_LIMIT); a no-op when limiting is off."""
    if settings.rate_limit_enabled:
        return limiter.limit(limit or settings.rate_limit)

    def passthrough(func):
        return func

    return passthrough
