"""Invite Registry - generate / validate / stats / list against the in-memory store.

Tests cover:
    - key shapes for numeric and named guests
    - empty names and keys rejected with InvalidInputError
    - duplicate names rejected with ConflictError, nothing stored
    - first scan wins, re-scans are idempotent, keep scanned_at and skip the write
    - stats after N generated and M scanned
    - concurrent scans and concurrent generates of the same guest
"""

import asyncio
import re

import pytest

from guestlist.core.errors import (
    ConflictError, InvalidInputError, StorageFailureError,
)
from guestlist.services.invite_registry import INVALID_CODE_MESSAGE, InviteRegistry

from tests.services.fakes import InMemoryInviteRepository


NUMERIC_KEY = re.compile(r"^guest_42_[0-9a-z]{6}$")
NAMED_KEY = re.compile(r"^jane_doe_[0-9a-z]{5}$")


# ─── generate ────────────────────────────────────────────────────

async def test_generate_numeric_name_uses_guest_prefix(registry):
    key = await registry.generate("42")
    assert NUMERIC_KEY.match(key)


async def test_generate_named_guest_uses_normalized_name(registry):
    key = await registry.generate("Jane Doe")
    assert NAMED_KEY.match(key)


async def test_generate_stores_unscanned_invite(registry, fake_repository, clock):
    key = await registry.generate("Jane Doe")
    record = fake_repository.rows[key]
    assert record.guest_name == "Jane Doe"
    assert record.scanned is False
    assert record.scanned_at is None
    assert record.created_at < clock.now


async def test_generate_keeps_name_exactly_as_supplied(registry, fake_repository):
    key = await registry.generate(" 42 ")
    assert key.startswith("guest_42_")
    assert fake_repository.rows[key].guest_name == " 42 "


@pytest.mark.parametrize("name", [None, "", "   ", "\t\n"])
async def test_generate_rejects_missing_name(registry, fake_repository, name):
    with pytest.raises(InvalidInputError) as exc:
        await registry.generate(name)
    assert exc.value.field == "guestName"
    assert fake_repository.rows == {}


async def test_generate_rejects_non_string_name(registry):
    with pytest.raises(InvalidInputError):
        await registry.generate(42)


async def test_generate_duplicate_name_conflicts(registry, fake_repository):
    await registry.generate("Jane Doe")
    with pytest.raises(ConflictError) as exc:
        await registry.generate("Jane Doe")
    assert exc.value.http_status == 409
    assert len(fake_repository.rows) == 1


async def test_generate_name_match_is_case_sensitive(registry):
    await registry.generate("Jane Doe")
    key = await registry.generate("jane doe")
    assert key.startswith("jane_doe_")


async def test_generate_key_collision_surfaces_as_storage_failure(fake_repository):
    registry = InviteRegistry(fake_repository, suffix=lambda n: "0" * n)
    await registry.generate("Jane Doe")
    with pytest.raises(StorageFailureError):
        await registry.generate("jane  doe")
    assert len(fake_repository.rows) == 1


async def test_concurrent_generate_same_name_only_one_succeeds():
    repository = InMemoryInviteRepository(yield_on_read=True)
    registry = InviteRegistry(repository)
    results = await asyncio.gather(
        registry.generate("Jane Doe"),
        registry.generate("Jane Doe"),
        return_exceptions=True,
    )
    keys = [r for r in results if isinstance(r, str)]
    conflicts = [r for r in results if isinstance(r, ConflictError)]
    assert len(keys) == 1
    assert len(conflicts) == 1
    assert list(repository.rows) == keys


# ─── validate ────────────────────────────────────────────────────

@pytest.mark.parametrize("key", [None, ""])
async def test_validate_rejects_missing_key(registry, key):
    with pytest.raises(InvalidInputError) as exc:
        await registry.validate(key)
    assert exc.value.field == "key"


async def test_validate_unknown_key_is_not_an_error(registry, fake_repository):
    await registry.generate("Jane Doe")
    before = dict(fake_repository.rows)

    outcome = await registry.validate("nobody_abcde")

    assert outcome.valid is False
    assert outcome.message == INVALID_CODE_MESSAGE
    assert outcome.guest_name is None
    assert outcome.stats is None
    assert fake_repository.rows == before


async def test_validate_first_scan_flips_state(registry, fake_repository):
    key = await registry.generate("Jane Doe")

    outcome = await registry.validate(key)

    assert outcome.valid is True
    assert outcome.guest_name == "Jane Doe"
    assert outcome.already_scanned is False
    record = fake_repository.rows[key]
    assert record.scanned is True
    assert record.scanned_at is not None


async def test_validate_rescan_is_idempotent(registry, fake_repository):
    key = await registry.generate("Jane Doe")
    await registry.validate(key)
    first_scanned_at = fake_repository.rows[key].scanned_at

    again = await registry.validate(key)

    assert again.valid is True
    assert again.already_scanned is True
    assert fake_repository.rows[key].scanned_at == first_scanned_at


async def test_validate_skips_write_for_scanned_invite(registry, fake_repository):
    key = await registry.generate("Jane Doe")

    for _ in range(3):
        await registry.validate(key)

    assert fake_repository.scan_writes == 1
    assert (await registry.stats()).scanned_count == 1


async def test_validate_scenario_reports_stats_after_scan(registry):
    await registry.generate("42")
    jane = await registry.generate("Jane Doe")

    assert (await registry.validate("unknown")).valid is False

    first = await registry.validate(jane)
    assert first.already_scanned is False
    assert (first.stats.total, first.stats.scanned_count) == (2, 1)

    second = await registry.validate(jane)
    assert second.already_scanned is True
    assert (second.stats.total, second.stats.scanned_count) == (2, 1)


async def test_concurrent_validate_exactly_one_first_scan():
    repository = InMemoryInviteRepository(yield_on_read=True)
    registry = InviteRegistry(repository)
    key = await registry.generate("Jane Doe")

    a, b = await asyncio.gather(registry.validate(key), registry.validate(key))

    assert sorted([a.already_scanned, b.already_scanned]) == [False, True]
    assert a.stats.scanned_count == 1
    assert b.stats.scanned_count == 1


# ─── stats / list_all ────────────────────────────────────────────

async def test_stats_empty_registry(registry):
    stats = await registry.stats()
    assert (stats.total, stats.scanned_count) == (0, 0)


async def test_stats_counts_generated_and_scanned(registry):
    keys = [await registry.generate(f"Guest {i}") for i in range(5)]
    for key in keys[:3]:
        await registry.validate(key)
    await registry.validate(keys[0])

    stats = await registry.stats()
    assert stats.total == 5
    assert stats.scanned_count == 3
    assert stats.scanned_count <= stats.total


async def test_list_all_newest_first(registry):
    for name in ("Alice", "Bob", "Carol"):
        await registry.generate(name)

    invites = await registry.list_all()

    assert [i.guest_name for i in invites] == ["Carol", "Bob", "Alice"]


async def test_list_all_reflects_latest_scan_state(registry):
    key = await registry.generate("Alice")
    assert (await registry.list_all())[0].scanned is False
    await registry.validate(key)
    assert (await registry.list_all())[0].scanned is True
