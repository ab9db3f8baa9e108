"""Admin Login - password check unlocking the admin guest-list view.

Invariants:
    - Comparison is constant-time (hmac.compare_digest)
    - An unset ADMIN_PASSWORD never matches
    - Always 200; success=false on mismatch (the frontend reads the flag)
"""

import hmac
import logging

from fastapi import APIRouter, Depends

from guestlist.config import Settings, get_settings
from guestlist.schemas.admin import LoginRequest, LoginResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["admin"])

ADMIN_TOKEN = "admin-authorized"


def check_admin_password(candidate: str | None, expected: str) -> bool:
    if not expected or candidate is None:
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))


@router.post("/login", response_model=LoginResponse, response_model_exclude_none=True)
async def admin_login(
    body: LoginRequest, settings: Settings = Depends(get_settings),
):
    if check_admin_password(body.password, settings.admin_password):
        return LoginResponse(success=True, token=ADMIN_TOKEN)
    logger.warning("Rejected admin login")
    return LoginResponse(success=False, message="Invalid Password")
