from typing import Optional

from fastapi import Header, HTTPException


def get_current_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """
    Caller identity.

    Identity comes from an upstream gateway via the X-User-Id header.
    Deployments with their own auth override this dependency with
    app.dependency_overrides.
    """
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Authentication required")
    return x_user_id
