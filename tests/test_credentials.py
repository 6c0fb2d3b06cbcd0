from __future__ import annotations

import bcrypt
import pytest

from cashcard_service.auth.credentials import (
    AccountSpec,
    CredentialRecord,
    CredentialStore,
    demo_accounts,
)
from cashcard_service.auth.models import CARD_OWNER, NON_OWNER


def test_verify_returns_principal_with_role(credentials: CredentialStore) -> None:
    principal = credentials.verify("sarah1", "abc123")
    assert principal is not None
    assert principal.subject == "sarah1"
    assert principal.has_role(CARD_OWNER)


def test_non_owner_role_is_reported(credentials: CredentialStore) -> None:
    principal = credentials.verify("hank-owns-no-cards", "qrs456")
    assert principal is not None
    assert principal.roles == frozenset({NON_OWNER})
    assert not principal.has_role(CARD_OWNER)


@pytest.mark.parametrize(
    ("username", "secret"),
    [
        ("sarah1", "xyz789"),
        ("kumar2", "abc123"),
        ("nobody", "abc123"),
        ("SARAH1", "abc123"),
        ("sarah1", ""),
    ],
)
def test_verify_rejects(credentials: CredentialStore, username: str, secret: str) -> None:
    assert credentials.verify(username, secret) is None


def test_secret_longer_than_bcrypt_limit_never_matches() -> None:
    password = "p" * 72
    store = CredentialStore.from_plaintext(
        [AccountSpec(username="long", password=password, role=CARD_OWNER)], rounds=4
    )
    assert store.verify("long", password) is not None
    assert store.verify("long", password + "extra") is None


def test_store_accepts_prehashed_records() -> None:
    hashed = bcrypt.hashpw(b"s3cret", bcrypt.gensalt(rounds=4))
    store = CredentialStore([CredentialRecord("ops", hashed, CARD_OWNER)], rounds=4)
    assert store.verify("ops", "s3cret") is not None
    assert store.usernames == frozenset({"ops"})


def test_duplicate_usernames_are_rejected() -> None:
    hashed = bcrypt.hashpw(b"x", bcrypt.gensalt(rounds=4))
    with pytest.raises(ValueError):
        CredentialStore(
            [CredentialRecord("dup", hashed, CARD_OWNER), CredentialRecord("dup", hashed, NON_OWNER)],
            rounds=4,
        )


def test_secrets_stay_out_of_reprs(credentials: CredentialStore) -> None:
    for account in demo_accounts():
        assert account.password not in repr(account)
    assert credentials.usernames == frozenset({"sarah1", "hank-owns-no-cards", "kumar2"})
