"""Invite Routes - generate, validate (scan), stats and guest list.

Invariants:
    - Paths match the scanner/admin frontend: /api/generate, /api/validate,
      /api/stats, /api/guests
    - Errors raised by the registry are rendered by the global GuestlistError handler
    - An unknown key is a 200 response with valid=false
"""

from fastapi import APIRouter, Depends

from guestlist.api.dependencies import get_invite_registry
from guestlist.schemas.invite import (
    GenerateRequest, GenerateResponse, InviteOut, StatsResponse,
    ValidateRequest, ValidateResponse,
)
from guestlist.services.invite_registry import InviteRegistry

router = APIRouter(prefix="/api", tags=["invites"])


@router.post("/generate", response_model=GenerateResponse)
async def generate_invite(
    body: GenerateRequest,
    registry: InviteRegistry = Depends(get_invite_registry),
):
    """Issue an invite key for a new guest."""
    key = await registry.generate(body.guest_name)
    return GenerateResponse(key=key)


@router.post(
    "/validate",
    response_model=ValidateResponse,
    response_model_exclude_none=True,
)
async def validate_invite(
    body: ValidateRequest,
    registry: InviteRegistry = Depends(get_invite_registry),
):
    """Scan a key at the door."""
    outcome = await registry.validate(body.key)
    return ValidateResponse.from_outcome(outcome)


@router.get("/stats", response_model=StatsResponse)
async def invite_stats(
    registry: InviteRegistry = Depends(get_invite_registry),
):
    return StatsResponse.from_stats(await registry.stats())


@router.get("/guests", response_model=list[InviteOut])
async def list_guests(
    registry: InviteRegistry = Depends(get_invite_registry),
):
    """All invites, newest first."""
    invites = await registry.list_all()
    return [InviteOut.model_validate(invite) for invite in invites]
