from __future__ import annotations

from findw.core.security import PasswordCheck, PasswordHasher


def _hasher() -> PasswordHasher:
    return PasswordHasher(time_cost=1, memory_cost_kib=1024, parallelism=1)


def test_same_password_hashes_differently_and_never_in_plaintext() -> None:
    hasher = _hasher()
    first = hasher.hash("correct horse")
    second = hasher.hash("correct horse")

    assert first != second
    assert "correct horse" not in first
    assert first.startswith("$argon2id$")


def test_verify_reports_match_and_mismatch() -> None:
    hasher = _hasher()
    credential = hasher.hash("pw")

    assert hasher.verify("pw", credential) is PasswordCheck.match
    assert hasher.verify("pw2", credential) is PasswordCheck.mismatch


def test_verify_treats_unparseable_credential_as_malformed() -> None:
    hasher = _hasher()

    assert hasher.verify("pw", "not-a-hash") is PasswordCheck.malformed


def test_burn_does_not_raise_for_any_password() -> None:
    hasher = _hasher()
    hasher.burn("pw")
    hasher.burn("")
