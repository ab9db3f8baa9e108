"""Invite Schemas - request/response models for the invite endpoints.

Invariants:
    - Request fields are untyped and unbounded at the schema level; the registry
      decides what counts as missing or malformed so every surface reports the
      same InvalidInputError
    - Wire names are camelCase (guestName, scannedCount, alreadyScanned) except
      the guest listing, which mirrors the table columns
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from guestlist.core.domain_types import InviteStats, ValidationOutcome


class GenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    guest_name: Any = Field(None, alias="guestName")


class GenerateResponse(BaseModel):
    key: str


class ValidateRequest(BaseModel):
    key: Any = None


class StatsResponse(BaseModel):
    total: int
    scanned_count: int = Field(serialization_alias="scannedCount")

    @classmethod
    def from_stats(cls, stats: InviteStats) -> "StatsResponse":
        return cls(total=stats.total, scanned_count=stats.scanned_count)


class ValidateResponse(BaseModel):
    """Scan result. `scanned` duplicates alreadyScanned for older scanner clients."""
    valid: bool
    guest_name: str | None = Field(None, serialization_alias="guestName")
    already_scanned: bool | None = Field(None, serialization_alias="alreadyScanned")
    scanned: bool | None = None
    stats: StatsResponse | None = None
    message: str | None = None

    @classmethod
    def from_outcome(cls, outcome: ValidationOutcome) -> "ValidateResponse":
        if not outcome.valid:
            return cls(valid=False, message=outcome.message)
        return cls(
            valid=True,
            guest_name=outcome.guest_name,
            already_scanned=outcome.already_scanned,
            scanned=outcome.already_scanned,
            stats=StatsResponse.from_stats(outcome.stats),
        )


class InviteOut(BaseModel):
    """One row of the admin guest list."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    key: str
    guest_name: str
    created_at: datetime
    scanned: bool
    scanned_at: datetime | None = None
