"""
Shared API dependencies.

Reusable FastAPI dependencies for caller identity (database access is
:func:`app.db.session.get_db`).
"""

from typing import Optional

from fastapi import Header, HTTPException, status


def get_current_user_id(x_user_id: Optional[int] = Header(None, alias="X-User-Id",
                                                         description="Id of the calling user"), ) -> int:
    """Extract the caller's user id from the ``X-User-Id`` header."""
    if x_user_id is None or x_user_id < 1:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing or invalid X-User-Id header", )
    return x_user_id
