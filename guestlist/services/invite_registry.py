"""Invite Registry - generate, validate (scan), stats and listing of invites.

Invariants:
    - generate rejects empty names (InvalidInputError) and taken names (ConflictError)
    - validate never raises for an unknown key; it returns valid=False
    - scanned flips False -> True at most once per key (repository conditional write)
    - an invite already in InviteState.SCANNED is reported without another write
    - stats returned by validate are read AFTER the scan was recorded
    - No caching: every call reads current durable state

Design Decisions:
    - Repository, suffix generator and clock injected; tests swap in fakes
    - Pre-insert name lookup is only a fast path; the unique constraint behind
      InviteRepository.insert decides concurrent races
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from guestlist.core.domain_types import (
    GuestName, InviteKey, InviteRecord, InviteState, InviteStats,
    ValidationOutcome,
)
from guestlist.core.errors import ConflictError, InvalidInputError
from guestlist.core.invite_keys import (
    SuffixGenerator, derive_invite_key, random_base36_suffix,
)
from guestlist.core.repository_protocols import InviteRepository

logger = logging.getLogger(__name__)

INVALID_CODE_MESSAGE = "Invalid Invite Code"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InviteRegistry:
    """Owns the invite lifecycle on top of an InviteRepository."""

    def __init__(
        self,
        repository: InviteRepository,
        suffix: SuffixGenerator = random_base36_suffix,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.repository = repository
        self._suffix = suffix
        self._clock = clock

    async def generate(self, guest_name: str | None) -> InviteKey:
        """Issue a key for a new guest. Returns the key once it is persisted."""
        if not isinstance(guest_name, str) or not guest_name.strip():
            raise InvalidInputError("Guest name required", "guestName")
        name = GuestName(guest_name)

        if await self.repository.get_by_guest_name(name) is not None:
            logger.info(
                f"[Duplicate] {name}", extra={"guest_name": name},
            )
            raise ConflictError(name)

        key = derive_invite_key(name, self._suffix)
        record = await self.repository.insert(key, name, self._clock())
        logger.info(
            f"[Generated] {name} (Key: {record.key})",
            extra={"guest_name": name, "invite_key": record.key},
        )
        return record.key

    async def validate(self, key: str | None) -> ValidationOutcome:
        """Scan a key. First scan wins; later scans report already_scanned."""
        if not isinstance(key, str) or not key:
            raise InvalidInputError("Key required", "key")
        invite_key = InviteKey(key)

        invite = await self.repository.get_by_key(invite_key)
        if invite is None:
            logger.info(
                f"[Invalid Scan] Key: {key}", extra={"invite_key": key},
            )
            return ValidationOutcome(valid=False, message=INVALID_CODE_MESSAGE)

        # SCANNED is terminal; only a CREATED invite needs the conditional write
        first_scan = (
            invite.state is InviteState.CREATED
            and await self.repository.mark_scanned(invite_key, self._clock())
        )
        if first_scan:
            logger.info(
                f"[Scanned] {invite.guest_name}", extra={"invite_key": key},
            )
        else:
            logger.info(
                f"[Re-Scanned] {invite.guest_name}", extra={"invite_key": key},
            )

        return ValidationOutcome(
            valid=True,
            guest_name=invite.guest_name,
            already_scanned=not first_scan,
            stats=await self.repository.stats(),
        )

    async def stats(self) -> InviteStats:
        return await self.repository.stats()

    async def list_all(self) -> list[InviteRecord]:
        """All invites, most recently created first."""
        return await self.repository.list_all()
