"""Header-token guard for the admin endpoints."""

import secrets
from typing import Optional

from fastapi import Header, HTTPException, status

from configs import get_settings


def require_admin(
    x_admin_token: Optional[str] = Header(default=None, alias="x-admin-token"),
) -> None:
    """Reject the request unless `x-admin-token` matches ADMIN_API_TOKEN."""
    expected = get_settings().ADMIN_API_TOKEN
    if (
        not expected
        or not x_admin_token
        or not secrets.compare_digest(x_admin_token.encode(), expected.encode())
    ):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid admin token")
