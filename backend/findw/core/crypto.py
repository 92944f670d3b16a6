"""Encryption at rest for third-party API tokens."""

from __future__ import annotations

import base64
import binascii
import hashlib
import os
from typing import Protocol

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from findw.core.exceptions import InternalError

_PREFIX = "enc:v1:"
_NONCE_SIZE = 12


class TokenCipher(Protocol):
    def encrypt(self, plaintext: str) -> str: ...

    def decrypt(self, ciphertext: str) -> str: ...


class AesGcmTokenCipher:
    """AES-256-GCM with a key derived from the configured secret string."""

    def __init__(self, secret: str, *, aad: str = "vk_token") -> None:
        self._key = hashlib.sha256(secret.encode("utf-8")).digest()
        self._aad = aad.encode("utf-8")

    def encrypt(self, plaintext: str) -> str:
        nonce = os.urandom(_NONCE_SIZE)
        ct = AESGCM(self._key).encrypt(nonce, plaintext.encode("utf-8"), self._aad)
        return _PREFIX + base64.b64encode(nonce).decode("ascii") + ":" + base64.b64encode(ct).decode("ascii")

    def decrypt(self, ciphertext: str) -> str:
        if not ciphertext.startswith(_PREFIX):
            raise InternalError("Corrupted encrypted field")
        parts = ciphertext[len(_PREFIX) :].split(":", 1)
        if len(parts) != 2:
            raise InternalError("Corrupted encrypted field")
        try:
            nonce = base64.b64decode(parts[0], validate=True)
            ct = base64.b64decode(parts[1], validate=True)
        except (binascii.Error, ValueError) as exc:
            raise InternalError("Corrupted encrypted field (base64)") from exc
        if len(nonce) != _NONCE_SIZE:
            raise InternalError("Corrupted encrypted field (nonce)")
        try:
            plaintext = AESGCM(self._key).decrypt(nonce, ct, self._aad)
        except InvalidTag as exc:
            raise InternalError("Encrypted field failed authentication") from exc
        return plaintext.decode("utf-8")
