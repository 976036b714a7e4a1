from __future__ import annotations

import logging
import secrets

from fastapi import HTTPException, status

from resumefit.core.config import settings

logger = logging.getLogger(__name__)


def check_api_key(x_api_key: str | None) -> None:
    """Reject the request unless it carries the configured API key.

    Open access when API_KEY is unset.
    """
    expected = settings.api_key
    if not expected:
        return
    if x_api_key and secrets.compare_digest(x_api_key.encode("utf-8"), expected.encode("utf-8")):
        return
    logger.info("api_key_rejected provided=%s", bool(x_api_key))
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Please provide a valid API key.",
    )
