"""
Endpoint describing the authenticated caller.

Clients use it to decide which controls to show: only callers holding
``ADMIN`` may create, update or delete resources.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from campus_api.app.core.security import ROLE_USER, require_role
from campus_api.app.schemas.common import CurrentUser

router = APIRouter()


@router.get("", response_model=CurrentUser)
async def get_current_user_info(current_user: Dict[str, Any] = Depends(require_role(ROLE_USER))) -> CurrentUser:
    """Return the caller's e-mail and role set."""
    return CurrentUser(user={"email": current_user["email"]}, roles=current_user["roles"])
