"""Request authentication for the extraction endpoint."""
from __future__ import annotations

import hmac
from typing import Optional

from fastapi import HTTPException, status

from .settings import Settings, get_settings


def _extract_bearer(token_header: Optional[str]) -> Optional[str]:
    if not token_header:
        return None
    parts = token_header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]


def verify_api_token(token_header: Optional[str], settings: Optional[Settings] = None) -> bool:
    """Validate the Authorization header when an API token is configured.

    Returns ``False`` when no token is configured (the endpoint is open),
    ``True`` when the bearer token matches, and raises a 401 otherwise.
    """

    settings = settings or get_settings()
    if not settings.api_token:
        return False
    token = _extract_bearer(token_header)
    if not token or not hmac.compare_digest(token, settings.api_token):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="invalid_api_token")
    return True


__all__ = ["verify_api_token"]
