"""SQL Invite Repository - InviteRepository implemented on an AsyncSession.

Invariants:
    - Every read bypasses the identity map (populate_existing): no stale scan state
    - mark_scanned is one UPDATE ... WHERE scanned IS false; rowcount decides first scan
    - Unique violation on insert: ConflictError if the guest name now exists,
      StorageFailureError otherwise (e.g. key collision)
    - Any other SQLAlchemy failure surfaces as StorageFailureError
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator

from sqlalchemy import case, func, select, update
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import AsyncSession

from guestlist.core.domain_types import (
    GuestName, InviteKey, InviteRecord, InviteStats,
)
from guestlist.core.errors import ConflictError, StorageFailureError
from guestlist.models.invite import Invite

logger = logging.getLogger(__name__)


class SqlInviteRepository:
    """Invite persistence over SQLAlchemy (PostgreSQL in production, SQLite in tests)."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @asynccontextmanager
    async def _storage_errors(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except OperationalError as e:
            logger.error(
                f"DB operational error: {e}", extra={"operation": operation},
            )
            raise StorageFailureError(
                "Connection or operational error", operation,
            ) from e
        except DBAPIError as e:
            logger.error(f"DB driver error: {e}", extra={"operation": operation})
            raise StorageFailureError("Database driver error", operation) from e
        except SQLAlchemyError as e:
            logger.error(f"SQLAlchemy error: {e}", extra={"operation": operation})
            raise StorageFailureError("Database operation failed", operation) from e

    async def _one(self, *criteria) -> InviteRecord | None:
        result = await self.db.execute(
            select(Invite)
            .where(*criteria)
            .execution_options(populate_existing=True),
        )
        row = result.scalar_one_or_none()
        return row.to_record() if row else None

    async def get_by_key(self, key: InviteKey) -> InviteRecord | None:
        async with self._storage_errors("lookup"):
            return await self._one(Invite.key == key)

    async def get_by_guest_name(
        self, guest_name: GuestName,
    ) -> InviteRecord | None:
        async with self._storage_errors("lookup"):
            return await self._one(Invite.guest_name == guest_name)

    async def insert(
        self, key: InviteKey, guest_name: GuestName, created_at: datetime,
    ) -> InviteRecord:
        row = Invite(
            key=key, guest_name=guest_name,
            created_at=created_at, scanned=False, scanned_at=None,
        )
        async with self._storage_errors("insert"):
            self.db.add(row)
            try:
                await self.db.commit()
            except IntegrityError as e:
                await self.db.rollback()
                logger.warning(
                    f"Unique constraint rejected invite insert: {e}",
                    extra={"guest_name": guest_name, "invite_key": key},
                )
                if await self.get_by_guest_name(guest_name) is not None:
                    raise ConflictError(guest_name) from e
                raise StorageFailureError(
                    "Integrity constraint violated", "insert",
                ) from e
            return row.to_record()

    async def mark_scanned(self, key: InviteKey, scanned_at: datetime) -> bool:
        stmt = (
            update(Invite)
            .where(Invite.key == key, Invite.scanned.is_(False))
            .values(scanned=True, scanned_at=scanned_at)
            .execution_options(synchronize_session=False)
        )
        async with self._storage_errors("update"):
            result = await self.db.execute(stmt)
            await self.db.commit()
            return result.rowcount == 1

    async def stats(self) -> InviteStats:
        stmt = select(
            func.count(Invite.id),
            func.count(case((Invite.scanned.is_(True), 1))),
        )
        async with self._storage_errors("stats"):
            total, scanned_count = (await self.db.execute(stmt)).one()
        return InviteStats(total=int(total), scanned_count=int(scanned_count))

    async def list_all(self) -> list[InviteRecord]:
        stmt = (
            select(Invite)
            .order_by(Invite.created_at.desc(), Invite.id.desc())
            .execution_options(populate_existing=True)
        )
        async with self._storage_errors("list"):
            result = await self.db.execute(stmt)
            return [row.to_record() for row in result.scalars().all()]
