from __future__ import annotations

import datetime as dt
from uuid import uuid4

import pytest
from jose import jwt

from findw.core.exceptions import UnauthorizedError
from findw.core.security import TokenCodec

NOW = dt.datetime(2026, 3, 1, 12, 0, 0, tzinfo=dt.timezone.utc)


def _codec(secret: str = "secret") -> TokenCodec:
    return TokenCodec(secret, ttl=dt.timedelta(minutes=30))


def test_token_is_accepted_for_its_whole_window() -> None:
    codec = _codec()
    subject = uuid4()
    token = codec.issue(str(subject), NOW)

    assert codec.verify_subject(token, NOW) == subject
    assert codec.verify_subject(token, NOW + dt.timedelta(minutes=29, seconds=59)) == subject


def test_token_is_rejected_at_and_after_expiry() -> None:
    codec = _codec()
    token = codec.issue(str(uuid4()), NOW)

    with pytest.raises(UnauthorizedError):
        codec.verify(token, NOW + dt.timedelta(minutes=30))
    with pytest.raises(UnauthorizedError):
        codec.verify(token, NOW + dt.timedelta(days=1))


def test_explicit_ttl_overrides_default() -> None:
    codec = _codec()
    token = codec.issue(str(uuid4()), NOW, ttl=dt.timedelta(minutes=15))

    claims = codec.verify(token, NOW)
    assert claims.exp - claims.iat == 15 * 60


def test_token_signed_with_other_secret_is_rejected() -> None:
    token = _codec("other").issue(str(uuid4()), NOW)

    with pytest.raises(UnauthorizedError):
        _codec().verify(token, NOW)


def test_garbage_token_is_rejected() -> None:
    with pytest.raises(UnauthorizedError):
        _codec().verify("not.a.jwt", NOW)


def test_non_uuid_subject_is_rejected() -> None:
    codec = _codec()
    token = codec.issue("alice", NOW)

    assert codec.verify(token, NOW).sub == "alice"
    with pytest.raises(UnauthorizedError):
        codec.verify_subject(token, NOW)


def test_missing_claims_are_rejected() -> None:
    token = jwt.encode({"sub": str(uuid4())}, "secret", algorithm="HS256")

    with pytest.raises(UnauthorizedError):
        _codec().verify(token, NOW)


def test_zero_ttl_is_honoured_not_replaced_by_default() -> None:
    codec = _codec()
    token = codec.issue(str(uuid4()), NOW, ttl=dt.timedelta(0))

    claims = jwt.get_unverified_claims(token)
    assert claims["exp"] == claims["iat"]
    with pytest.raises(UnauthorizedError):
        codec.verify(token, NOW)
