from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from noteful.application.services.tokens import (
    InvalidTokenError,
    JwtTokenService,
    TokenExpiredError,
    TokenVerificationError,
)
from noteful.domain.users.entities import UserView
from noteful.tests.support import FULLNAME, TEST_SECRET, USER_ID, USERNAME


@pytest.fixture()
def tokens() -> JwtTokenService:
    return JwtTokenService(secret=TEST_SECRET)


@pytest.fixture()
def view() -> UserView:
    return UserView(id=USER_ID, username=USERNAME, fullname=FULLNAME)


def test_issue_then_verify_preserves_user_view(tokens: JwtTokenService, view: UserView) -> None:
    claims = tokens.verify(tokens.issue(view, subject=USERNAME))

    assert claims.user == {"id": USER_ID, "username": USERNAME, "fullname": FULLNAME}
    assert "password" not in claims.user
    assert claims.subject == USERNAME


def test_issued_token_has_expected_claim_shape(tokens: JwtTokenService, view: UserView) -> None:
    token = tokens.issue(view, subject=USERNAME)

    header = jwt.get_unverified_header(token)
    payload = jwt.decode(token, TEST_SECRET, algorithms=["HS256"])

    assert header["alg"] == "HS256"
    assert set(payload) == {"user", "sub", "iat", "exp"}
    assert payload["exp"] - payload["iat"] == int(timedelta(days=7).total_seconds())


def test_issue_strips_password_fields_from_mappings(tokens: JwtTokenService) -> None:
    token = tokens.issue(
        {"id": USER_ID, "username": USERNAME, "password": "examplePass", "password_hash": "x"},
        subject=USERNAME,
    )

    assert tokens.verify(token).user == {"id": USER_ID, "username": USERNAME}


def test_custom_ttl(tokens: JwtTokenService, view: UserView) -> None:
    before = datetime.now(UTC).replace(microsecond=0)
    claims = tokens.verify(tokens.issue(view, USERNAME, ttl=timedelta(minutes=5)))

    assert before + timedelta(minutes=5) <= claims.expires_at
    assert claims.expires_at <= datetime.now(UTC) + timedelta(minutes=5)


def test_verify_rejects_expired_token(tokens: JwtTokenService, view: UserView) -> None:
    token = tokens.issue(view, USERNAME, ttl=timedelta(seconds=-10))

    with pytest.raises(TokenExpiredError) as excinfo:
        tokens.verify(token)
    assert excinfo.value.reason == "expired"


def test_verify_rejects_foreign_secret(view: UserView) -> None:
    token = JwtTokenService(secret="Incorrect Secret, not ours at all!").issue(view, USERNAME)

    with pytest.raises(InvalidTokenError) as excinfo:
        JwtTokenService(secret=TEST_SECRET).verify(token)
    assert excinfo.value.reason == "invalid"


def test_expired_token_with_foreign_secret_is_invalid(view: UserView) -> None:
    token = JwtTokenService(secret="Incorrect Secret, not ours at all!").issue(
        view, USERNAME, ttl=timedelta(seconds=-10)
    )

    with pytest.raises(InvalidTokenError):
        JwtTokenService(secret=TEST_SECRET).verify(token)


def test_verify_rejects_disallowed_algorithm(view: UserView) -> None:
    token = JwtTokenService(secret=TEST_SECRET, algorithm="HS512").issue(view, USERNAME)

    with pytest.raises(InvalidTokenError):
        JwtTokenService(secret=TEST_SECRET, algorithm="HS256").verify(token)


def test_verify_rejects_unsigned_token() -> None:
    token = jwt.encode(
        {"user": {"username": USERNAME}, "sub": USERNAME, "exp": datetime.now(UTC) + timedelta(days=1)},
        key=None,
        algorithm="none",
    )

    with pytest.raises(InvalidTokenError):
        JwtTokenService(secret=TEST_SECRET).verify(token)


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_verify_rejects_malformed_tokens(tokens: JwtTokenService, token: str) -> None:
    with pytest.raises(TokenVerificationError):
        tokens.verify(token)


@pytest.mark.parametrize(
    "payload",
    [
        {"user": {"username": USERNAME}, "sub": USERNAME},
        {"user": {"username": USERNAME}, "exp": datetime.now(UTC) + timedelta(days=1)},
        {"username": USERNAME, "sub": USERNAME, "exp": datetime.now(UTC) + timedelta(days=1)},
        {"user": "exampleUser", "sub": USERNAME, "exp": datetime.now(UTC) + timedelta(days=1)},
    ],
)
def test_verify_requires_exp_sub_and_user_claims(tokens: JwtTokenService, payload: dict) -> None:
    token = jwt.encode(payload, TEST_SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        tokens.verify(token)


def test_refresh_keeps_subject_and_user_and_extends_expiry(
    tokens: JwtTokenService, view: UserView
) -> None:
    original = tokens.issue(view, USERNAME, ttl=timedelta(hours=1))
    refreshed = tokens.refresh(original)

    old_claims = tokens.verify(original)
    new_claims = tokens.verify(refreshed)

    assert new_claims.user == old_claims.user
    assert new_claims.subject == USERNAME
    assert new_claims.expires_at >= old_claims.expires_at


def test_refresh_never_shortens_a_longer_lived_token(tokens: JwtTokenService, view: UserView) -> None:
    original = tokens.issue(view, USERNAME, ttl=timedelta(days=30))

    refreshed = tokens.refresh(original)

    assert tokens.verify(refreshed).expires_at == tokens.verify(original).expires_at


def test_refresh_drops_password_smuggled_into_user_claim(tokens: JwtTokenService) -> None:
    token = jwt.encode(
        {
            "user": {"username": USERNAME, "fullname": FULLNAME, "password": "examplePass"},
            "sub": USERNAME,
            "exp": datetime.now(UTC) + timedelta(days=7),
        },
        TEST_SECRET,
        algorithm="HS256",
    )

    refreshed = tokens.verify(tokens.refresh(token))

    assert refreshed.user == {"username": USERNAME, "fullname": FULLNAME}


def test_refresh_rejects_expired_token(tokens: JwtTokenService, view: UserView) -> None:
    with pytest.raises(TokenExpiredError):
        tokens.refresh(tokens.issue(view, USERNAME, ttl=timedelta(seconds=-10)))


def test_empty_secret_is_rejected() -> None:
    with pytest.raises(ValueError):
        JwtTokenService(secret="")
