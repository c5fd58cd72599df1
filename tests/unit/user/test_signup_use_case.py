from __future__ import annotations

import sys
from pathlib import Path

import bcrypt
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from rbo.application.dto.requests import SignUpRequest
from rbo.application.errors import UserNotFoundError
from rbo.application.use_cases.users import DuplicateUserError, GetUser, ListUsers, SignUp
from rbo.domain.common.ids import UserId
from rbo.infrastructure.db.repositories.user_repo import MongoUserRepository
from rbo.infrastructure.security.password_hasher import BcryptPasswordHasher


def _request(email: str = "ana@example.com", phone: str = "+15550100") -> SignUpRequest:
    return SignUpRequest(
        first_name="Ana",
        last_name="Lopez",
        email=email,
        phone=phone,
        password="s3cret-pass",
    )


def _sign_up(store) -> SignUp:
    return SignUp(MongoUserRepository(store.user), BcryptPasswordHasher(rounds=4))


def test_sign_up_stores_hashed_password(store) -> None:
    user = _sign_up(store).execute(_request(email="Ana@Example.com"))

    assert user.email == "ana@example.com"
    assert "password" not in user.model_dump()
    stored = store.user.find_one({"user_id": user.user_id})
    assert stored["password"] != "s3cret-pass"
    assert stored["password"].startswith("$2b$04$")
    assert BcryptPasswordHasher().verify("s3cret-pass", stored["password"])
    assert not BcryptPasswordHasher().verify("wrong", stored["password"])


@pytest.mark.parametrize(
    ("email", "phone"),
    [("ana@example.com", "+15550199"), ("other@example.com", "+15550100")],
)
def test_duplicate_email_or_phone_conflicts(store, email: str, phone: str) -> None:
    _sign_up(store).execute(_request())

    with pytest.raises(DuplicateUserError):
        _sign_up(store).execute(_request(email=email, phone=phone))

    assert store.user.count_documents({}) == 1


def test_get_and_list_users(store) -> None:
    created = _sign_up(store).execute(_request())
    _sign_up(store).execute(_request(email="ben@example.com", phone="+15550101"))

    fetched = GetUser(MongoUserRepository(store.user)).execute(UserId(created.user_id))
    page = ListUsers(MongoUserRepository(store.user)).execute(page=1, page_size=1)

    assert fetched.email == "ana@example.com"
    assert page.total_count == 2
    assert len(page.user_items) == 1


def test_unknown_user(store) -> None:
    with pytest.raises(UserNotFoundError):
        GetUser(MongoUserRepository(store.user)).execute(UserId("usr_missing"))


def test_hasher_accepts_hashes_written_by_other_bcrypt_clients() -> None:
    legacy = bcrypt.hashpw(b"s3cret-pass", bcrypt.gensalt(rounds=4, prefix=b"2a")).decode("ascii")

    assert BcryptPasswordHasher(rounds=4).verify("s3cret-pass", legacy)
    assert not BcryptPasswordHasher(rounds=4).verify("other-pass", legacy)


@pytest.mark.parametrize("stored", ["", "plain-text", "pbkdf2_sha256$x$salt$digest", "$2b$04$short"])
def test_hasher_rejects_malformed_stored_hashes(stored: str) -> None:
    assert not BcryptPasswordHasher(rounds=4).verify("s3cret-pass", stored)


def test_hasher_rounds_come_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("BCRYPT_ROUNDS", "5")

    assert BcryptPasswordHasher().hash("s3cret-pass").startswith("$2b$05$")
