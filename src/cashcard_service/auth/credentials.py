"""
cashcard_service.auth.credentials

Fixed, immutable credential store.

Responsibilities:
- Hold the provisioned principals (username, bcrypt hash, role).
- Verify a presented username/secret pair and report the principal's role.

Principals are provisioned once when the app is built; there is no runtime
user management.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

import bcrypt

from cashcard_service.auth.models import CARD_OWNER, NON_OWNER, Principal

# bcrypt only looks at the first 72 bytes of a secret.
_BCRYPT_MAX_BYTES = 72


@dataclass(frozen=True, slots=True)
class AccountSpec:
    """Plaintext account definition, hashed once by `CredentialStore.from_plaintext`."""

    username: str
    password: str = field(repr=False)
    role: str


@dataclass(frozen=True, slots=True)
class CredentialRecord:
    username: str
    secret_hash: bytes = field(repr=False)
    role: str


class CredentialStore:
    def __init__(self, records: Iterable[CredentialRecord], *, rounds: int = 12) -> None:
        by_name: dict[str, CredentialRecord] = {}
        for record in records:
            if record.username in by_name:
                raise ValueError(f"duplicate principal: {record.username}")
            by_name[record.username] = record
        self._records: Mapping[str, CredentialRecord] = MappingProxyType(by_name)
        # Checked for unknown usernames so they cost the same as a wrong secret.
        self._dummy_hash = bcrypt.hashpw(b"cashcard-dummy-secret", bcrypt.gensalt(rounds=rounds))

    @classmethod
    def from_plaintext(cls, accounts: Iterable[AccountSpec], *, rounds: int = 12) -> CredentialStore:
        records = [
            CredentialRecord(
                username=a.username,
                secret_hash=bcrypt.hashpw(a.password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)),
                role=a.role,
            )
            for a in accounts
        ]
        return cls(records, rounds=rounds)

    @property
    def usernames(self) -> frozenset[str]:
        return frozenset(self._records)

    def verify(self, username: str, secret: str) -> Principal | None:
        """
        Return the principal when `secret` matches the stored hash for `username`.

        Unknown user and wrong secret both return None.
        """

        record = self._records.get(username)
        candidate = record.secret_hash if record is not None else self._dummy_hash
        raw = secret.encode("utf-8")
        if len(raw) > _BCRYPT_MAX_BYTES:
            # Reject instead of matching on the truncated prefix.
            bcrypt.checkpw(raw[:_BCRYPT_MAX_BYTES], self._dummy_hash)
            return None

        matched = bcrypt.checkpw(raw, candidate)
        if record is None or not matched:
            return None
        return Principal(subject=record.username, roles=frozenset({record.role}))


def demo_accounts() -> tuple[AccountSpec, ...]:
    return (
        AccountSpec(username="sarah1", password="abc123", role=CARD_OWNER),
        AccountSpec(username="hank-owns-no-cards", password="qrs456", role=NON_OWNER),
        AccountSpec(username="kumar2", password="xyz789", role=CARD_OWNER),
    )


# --- Module Notes -----------------------------------------------------------
# `demo_accounts` backs local dev and the test suite; production deployments pass
# their own store to `api.app.create_app`.
