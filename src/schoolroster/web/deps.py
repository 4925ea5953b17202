"""Request dependencies."""

from __future__ import annotations

from fastapi import Header, HTTPException, status

from schoolroster.core.context import RequestContext


async def get_request_context(
    x_user_id: str | None = Header(default=None),
) -> RequestContext:
    """Build the acting-user context from the X-User-Id header.

    Token issuance happens upstream; this API only needs the resolved
    user identity.
    """
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-User-Id header",
        )
    return RequestContext(user_id=x_user_id.strip())
