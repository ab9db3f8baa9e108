"""Invite Key Derivation - pure key policy for newly generated invites.

Invariants:
    - Numeric guest names (after trimming) -> guest_<digits>_<6 chars>
    - Any other name -> lowercased, whitespace runs collapsed to "_", + _<5 chars>
    - Suffix characters are always drawn from 0-9a-z
    - No IO: uniqueness is enforced by the store, not here

Design Decisions:
    - Suffix generator is an injectable callable so tests can pin the output
    - secrets.choice for the default generator; keeps the charset and lengths of
      codes already issued
"""

import re
import secrets
import string
from typing import Protocol

from guestlist.core.domain_types import InviteKey

SUFFIX_ALPHABET = string.digits + string.ascii_lowercase
NUMERIC_SUFFIX_LENGTH = 6
NAME_SUFFIX_LENGTH = 5

_NUMERIC_NAME = re.compile(r"[0-9]+")
_WHITESPACE_RUN = re.compile(r"\s+")


class SuffixGenerator(Protocol):
    """Produces a random lowercase base-36 string of the requested length."""
    def __call__(self, length: int) -> str: ...


def random_base36_suffix(length: int) -> str:
    """Default suffix generator backed by the OS CSPRNG."""
    return "".join(secrets.choice(SUFFIX_ALPHABET) for _ in range(length))


def is_numeric_name(guest_name: str) -> bool:
    return _NUMERIC_NAME.fullmatch(guest_name.strip()) is not None


def normalize_name(guest_name: str) -> str:
    """Lowercase and collapse whitespace runs into single underscores."""
    return _WHITESPACE_RUN.sub("_", guest_name.lower())


def derive_invite_key(
    guest_name: str, suffix: SuffixGenerator = random_base36_suffix,
) -> InviteKey:
    """Build the scan key for a guest. Pure apart from the suffix generator."""
    if is_numeric_name(guest_name):
        return InviteKey(
            f"guest_{guest_name.strip()}_{suffix(NUMERIC_SUFFIX_LENGTH)}"
        )
    return InviteKey(f"{normalize_name(guest_name)}_{suffix(NAME_SUFFIX_LENGTH)}")
