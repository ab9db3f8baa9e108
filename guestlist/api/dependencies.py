"""Request-scoped wiring: one InviteRegistry per request over that request's DB session."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from guestlist.infrastructure.database import get_db
from guestlist.infrastructure.invite_repository import SqlInviteRepository
from guestlist.services.invite_registry import InviteRegistry


async def get_invite_registry(
    db: AsyncSession = Depends(get_db),
) -> InviteRegistry:
    return InviteRegistry(SqlInviteRepository(db))
