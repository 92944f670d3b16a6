"""VK API tokens: stored encrypted, deduplicated per user by SHA-256 digest."""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from findw.core.crypto import TokenCipher
from findw.core.exceptions import InternalError, InvalidInputError
from findw.core.sanitize import clean_token_values
from findw.models.vk_token import VkToken

logger = logging.getLogger(__name__)

MAX_TOKENS_PER_REQUEST = 100


@dataclass(frozen=True)
class TokenInsertResult:
    inserted: int
    skipped: int


def hash_vk_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def _clean_tokens(tokens: list[str]) -> list[str]:
    try:
        return clean_token_values(tokens, max_items=MAX_TOKENS_PER_REQUEST)
    except ValueError as exc:
        raise InvalidInputError(str(exc)) from exc


def add_vk_tokens(db: Session, cipher: TokenCipher, *, user_id: UUID, tokens: list[str]) -> TokenInsertResult:
    tokens = _clean_tokens(tokens)
    by_hash = {hash_vk_token(token): token for token in tokens}
    existing = {
        token_hash
        for (token_hash,) in db.query(VkToken.token_hash).filter(
            VkToken.user_id == user_id,
            VkToken.token_hash.in_(list(by_hash)),
        )
    }

    inserted = 0
    for token_hash, token in by_hash.items():
        if token_hash in existing:
            continue
        db.add(VkToken(user_id=user_id, token_hash=token_hash, token_encrypted=cipher.encrypt(token)))
        inserted += 1
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("VK token insert failed for user %s", user_id)
        raise InternalError() from exc

    skipped = len(tokens) - inserted
    logger.info("VK tokens stored for user %s: inserted=%s skipped=%s", user_id, inserted, skipped)
    return TokenInsertResult(inserted=inserted, skipped=skipped)


def delete_vk_tokens(db: Session, *, user_id: UUID, tokens: list[str]) -> int:
    tokens = _clean_tokens(tokens)
    hashes = list({hash_vk_token(token) for token in tokens})
    try:
        deleted = (
            db.query(VkToken)
            .filter(VkToken.user_id == user_id, VkToken.token_hash.in_(hashes))
            .delete(synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("VK token delete failed for user %s", user_id)
        raise InternalError() from exc
    return int(deleted or 0)


def list_vk_tokens_for_user(db: Session, cipher: TokenCipher, *, user_id: UUID) -> list[str]:
    """Return the user's tokens in plaintext, newest first."""
    rows = (
        db.query(VkToken)
        .filter(VkToken.user_id == user_id)
        .order_by(VkToken.created_at.desc())
        .all()
    )
    return [cipher.decrypt(row.token_encrypted) for row in rows]
