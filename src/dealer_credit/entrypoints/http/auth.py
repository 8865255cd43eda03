"""API key check for the /v1 routes."""

from __future__ import annotations

import hmac
import logging

from fastapi import Header

from dealer_credit.domain.errors import UnauthorizedError
from dealer_credit.infra.config import api_key

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-Key"


def require_api_key(x_api_key: str | None = Header(default=None, alias=API_KEY_HEADER)) -> None:
    """
    Rejects the request unless the X-API-Key header matches API_KEY.

    When API_KEY is not configured every request passes (development mode).

    Raises:
        UnauthorizedError: If the header is missing or does not match
    """
    expected = api_key()
    if expected is None:
        return

    if x_api_key is None:
        raise UnauthorizedError(f"Missing {API_KEY_HEADER} header")

    if not hmac.compare_digest(x_api_key.encode(), expected.encode()):
        raise UnauthorizedError("Invalid API key")


def warn_if_auth_disabled() -> None:
    if api_key() is None:
        logger.warning("API_KEY is not set; /v1 routes accept unauthenticated requests")
