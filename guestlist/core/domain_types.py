"""Domain Types - value objects passed between the registry and its storage.

Invariants:
    - InviteKey and GuestName wrap str; never mix them up in signatures
    - InviteRecord is a frozen snapshot; mutating an invite goes through the repository
    - InviteStats.scanned_count <= InviteStats.total
    - ValidationOutcome.valid is False only for unknown keys (no guest, no stats)

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - Frozen dataclasses instead of ORM rows: core never sees SQLAlchemy objects
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

InviteKey = NewType("InviteKey", str)
GuestName = NewType("GuestName", str)


# ─── Enums ───────────────────────────────────────────────────────

class InviteState(str, Enum):
    """Invite lifecycle states. SCANNED is terminal."""
    CREATED = "created"
    SCANNED = "scanned"


# ─── Value Objects ───────────────────────────────────────────────

@dataclass(frozen=True)
class InviteRecord:
    """Snapshot of one stored invite."""
    id: int
    key: InviteKey
    guest_name: GuestName
    created_at: datetime
    scanned: bool = False
    scanned_at: datetime | None = None

    @property
    def state(self) -> InviteState:
        return InviteState.SCANNED if self.scanned else InviteState.CREATED


@dataclass(frozen=True)
class InviteStats:
    """Aggregate attendance counts."""
    total: int
    scanned_count: int


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of scanning a key.

    already_scanned reports the state observed BEFORE this scan, so the first
    scan of a key gets False and every later one gets True.
    """
    valid: bool
    guest_name: GuestName | None = None
    already_scanned: bool | None = None
    stats: InviteStats | None = None
    message: str | None = None
