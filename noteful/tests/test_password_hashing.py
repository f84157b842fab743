from __future__ import annotations

import pytest

from noteful.application.services.password_hashing import WerkzeugPasswordHasher
from noteful.tests.support import FAST_HASH_METHOD


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(method=FAST_HASH_METHOD)


def test_hash_is_salted_and_not_plaintext(hasher: WerkzeugPasswordHasher) -> None:
    first = hasher.hash("examplePass")
    second = hasher.hash("examplePass")

    assert first != "examplePass"
    assert "examplePass" not in first
    assert first != second


def test_verify_accepts_matching_password(hasher: WerkzeugPasswordHasher) -> None:
    digest = hasher.hash("examplePass")

    assert hasher.verify("examplePass", digest) is True
    assert hasher.verify("nopenopenope", digest) is False


@pytest.mark.parametrize(
    "digest",
    ["", "not-a-hash", "bogus$salt$value", "unknown:method$salt$abc"],
)
def test_verify_returns_false_for_malformed_digest(
    hasher: WerkzeugPasswordHasher, digest: str
) -> None:
    assert hasher.verify("examplePass", digest) is False


def test_default_method_is_scrypt() -> None:
    digest = WerkzeugPasswordHasher().hash("examplePass")

    assert digest.startswith("scrypt:")


def test_unknown_method_is_rejected_on_construction() -> None:
    with pytest.raises(ValueError):
        WerkzeugPasswordHasher(method="bogus")
