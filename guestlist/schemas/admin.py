"""Admin Schemas - password check for the admin guest-list view."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    password: str | None = None


class LoginResponse(BaseModel):
    success: bool
    token: str | None = None
    message: str | None = None
