"""Security helpers for hashing passwords, issuing JWTs and minting refresh tokens."""

from __future__ import annotations

import base64
import datetime as dt
import enum
import hashlib
import logging
import secrets
from dataclasses import dataclass
from typing import Any, Protocol
from uuid import UUID

from jose import JWTError, jwt
from passlib.context import CryptContext

from findw.core.clock import Clock, SystemClock
from findw.core.config import Settings
from findw.core.crypto import AesGcmTokenCipher, TokenCipher
from findw.core.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)

TOKEN_TYPE_LABEL = "Bearer"


class PasswordCheck(str, enum.Enum):
    match = "match"
    mismatch = "mismatch"
    malformed = "malformed"


class PasswordHasher:
    """Argon2id hashing through passlib; every call draws a fresh random salt."""

    def __init__(self, *, time_cost: int = 3, memory_cost_kib: int = 65536, parallelism: int = 4) -> None:
        self._context = CryptContext(
            schemes=["argon2"],
            deprecated="auto",
            argon2__time_cost=time_cost,
            argon2__memory_cost=memory_cost_kib,
            argon2__parallelism=parallelism,
        )
        self._dummy_hash: str | None = None

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def burn(self, password: str) -> None:
        """Spend one verification on a throwaway hash so unknown emails cost as much as known ones."""
        if self._dummy_hash is None:
            self._dummy_hash = self._context.hash(secrets.token_urlsafe(16))
        self._context.verify(password, self._dummy_hash)

    def verify(self, password: str, credential: str) -> PasswordCheck:
        try:
            matched = self._context.verify(password, credential)
        except (ValueError, TypeError):
            return PasswordCheck.malformed
        return PasswordCheck.match if matched else PasswordCheck.mismatch


@dataclass(frozen=True)
class AccessClaims:
    sub: str
    iat: int
    exp: int


class TokenCodec:
    """Signs and verifies access tokens; expiry is checked here, against the caller's clock."""

    def __init__(self, secret: str, *, algorithm: str = "HS256", ttl: dt.timedelta) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl

    def issue(self, subject: str, now: dt.datetime, ttl: dt.timedelta | None = None) -> str:
        issued_at = int(now.timestamp())
        expires_at = issued_at + int((ttl if ttl is not None else self._ttl).total_seconds())
        claims: dict[str, Any] = {"sub": subject, "iat": issued_at, "exp": expires_at}
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def verify(self, token: str, now: dt.datetime) -> AccessClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"verify_exp": False, "verify_aud": False},
            )
        except JWTError as exc:
            raise UnauthorizedError() from exc

        sub = payload.get("sub")
        iat = payload.get("iat")
        exp = payload.get("exp")
        if not isinstance(sub, str) or not sub:
            raise UnauthorizedError()
        if not isinstance(iat, int) or not isinstance(exp, int):
            raise UnauthorizedError()
        if now.timestamp() >= exp:
            raise UnauthorizedError()
        return AccessClaims(sub=sub, iat=iat, exp=exp)

    def verify_subject(self, token: str, now: dt.datetime) -> UUID:
        claims = self.verify(token, now)
        try:
            return UUID(claims.sub)
        except ValueError as exc:
            raise UnauthorizedError() from exc


class RandomSource(Protocol):
    def token_bytes(self, nbytes: int) -> bytes: ...


class SystemRandomSource:
    def token_bytes(self, nbytes: int) -> bytes:
        return secrets.token_bytes(nbytes)


def new_refresh_token(random_source: RandomSource, nbytes: int = 32) -> str:
    raw = random_source.token_bytes(nbytes)
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def hash_refresh_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


@dataclass
class SecurityContext:
    """Keying material and crypto capabilities, built once per app and passed by reference."""

    settings: Settings
    password_hasher: PasswordHasher
    token_codec: TokenCodec
    token_cipher: TokenCipher
    clock: Clock
    random_source: RandomSource

    @property
    def refresh_token_ttl(self) -> dt.timedelta:
        return dt.timedelta(days=self.settings.REFRESH_TOKEN_EXPIRE_DAYS)

    @property
    def login_access_ttl(self) -> dt.timedelta:
        return dt.timedelta(minutes=self.settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    @property
    def refresh_access_ttl(self) -> dt.timedelta:
        return dt.timedelta(minutes=self.settings.refresh_access_token_minutes)


def build_security_context(
    settings: Settings,
    *,
    clock: Clock | None = None,
    random_source: RandomSource | None = None,
    password_hasher: PasswordHasher | None = None,
) -> SecurityContext:
    return SecurityContext(
        settings=settings,
        password_hasher=password_hasher
        or PasswordHasher(
            time_cost=settings.PASSWORD_HASH_TIME_COST,
            memory_cost_kib=settings.PASSWORD_HASH_MEMORY_COST_KIB,
            parallelism=settings.PASSWORD_HASH_PARALLELISM,
        ),
        token_codec=TokenCodec(
            settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            ttl=dt.timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        ),
        token_cipher=AesGcmTokenCipher(settings.VK_TOKEN_ENC_KEY),
        clock=clock or SystemClock(),
        random_source=random_source or SystemRandomSource(),
    )
