"""Caller identity taken from the ``X-Alumni-Id`` header.

Authentication happens in front of this API; the gateway forwards the
alumnus' ID in a header.
"""

from uuid import UUID

from fastapi import Header, HTTPException, status


def optional_alumni_id(x_alumni_id: str | None = Header(default=None)) -> str | None:
    """The caller's alumni ID, or None for anonymous requests.

    Raises:
        HTTPException: 400 if the header is not a UUID
    """
    if x_alumni_id is None:
        return None
    try:
        return str(UUID(x_alumni_id))
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="X-Alumni-Id must be a UUID",
        )


def require_alumni_id(x_alumni_id: str | None = Header(default=None)) -> str:
    """The caller's alumni ID.

    Raises:
        HTTPException: 401 if the header is missing, 400 if it is not a UUID
    """
    alumni_id = optional_alumni_id(x_alumni_id)
    if alumni_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Identity required (X-Alumni-Id header)",
        )
    return alumni_id
