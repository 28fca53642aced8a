"""Caller identity supplied by the front end."""

from fastapi import Header, HTTPException, status


async def get_current_username(
    x_username: str | None = Header(default=None),
) -> str:
    """Return the username from the ``X-Username`` header, or 401 if absent."""
    username = (x_username or "").strip()
    if not username:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-Username header",
        )
    return username
