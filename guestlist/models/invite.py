"""Invite ORM - one row per guest, holding the scan key and scan state.

Invariants:
    - key and guest_name are each unique (enforced by unique indexes)
    - scanned defaults to False; scanned_at is NULL until the first scan
    - id is an internal surrogate, never exposed as the scan code
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from guestlist.core.domain_types import GuestName, InviteKey, InviteRecord
from guestlist.db.base import Base


class Invite(Base):
    __tablename__ = "invites"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    key: Mapped[str] = mapped_column(
        Text, nullable=False, unique=True, index=True,
    )
    guest_name: Mapped[str] = mapped_column(
        Text, nullable=False, unique=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        default=lambda: datetime.now(timezone.utc),
    )
    scanned: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    scanned_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    def to_record(self) -> InviteRecord:
        return InviteRecord(
            id=self.id,
            key=InviteKey(self.key),
            guest_name=GuestName(self.guest_name),
            created_at=self.created_at,
            scanned=self.scanned,
            scanned_at=self.scanned_at,
        )
