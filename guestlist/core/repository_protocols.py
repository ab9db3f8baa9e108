"""Boundary Protocols - contract between the invite registry and its record store.

Invariants:
    - Core NEVER imports from infrastructure; dependency arrows point inward only
    - All IO goes through InviteRepository, injected into the registry
    - mark_scanned is a single conditional write: returns True only for the call
      that flipped scanned from False to True
    - insert raises ConflictError when the guest name is taken and
      StorageFailureError for any other rejected write

Design Decisions:
    - Protocol over ABC: structural subtyping, the in-memory test fake needs no base class
"""

from datetime import datetime
from typing import Protocol

from guestlist.core.domain_types import (
    GuestName, InviteKey, InviteRecord, InviteStats,
)


class InviteRepository(Protocol):
    """Contract for invite persistence, implemented by infrastructure."""
    async def get_by_key(self, key: InviteKey) -> InviteRecord | None: ...
    async def get_by_guest_name(
        self, guest_name: GuestName,
    ) -> InviteRecord | None: ...
    async def insert(
        self, key: InviteKey, guest_name: GuestName, created_at: datetime,
    ) -> InviteRecord: ...
    async def mark_scanned(self, key: InviteKey, scanned_at: datetime) -> bool: ...
    async def stats(self) -> InviteStats: ...
    async def list_all(self) -> list[InviteRecord]: ...
