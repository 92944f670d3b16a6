"""Input sanitization helpers for request payloads."""

from __future__ import annotations

import re
import unicodedata
from typing import Iterable

_WHITESPACE_RE = re.compile(r"\s+")


def _strip_control_chars(value: str, *, allow_newlines: bool) -> str:
    kept: list[str] = []
    for ch in value:
        if ch == "\n" and allow_newlines:
            kept.append(ch)
        elif unicodedata.category(ch) != "Cc":
            kept.append(ch)
    return "".join(kept)


def clean_text(value: str | None, *, allow_newlines: bool = False) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        value = str(value)
    value = value.replace("\r\n", "\n").replace("\r", "\n")
    value = _strip_control_chars(value, allow_newlines=allow_newlines).strip()
    if not allow_newlines:
        return _WHITESPACE_RE.sub(" ", value)
    return value


def clean_single_line(value: str | None) -> str:
    return clean_text(value, allow_newlines=False)


def clean_multiline(value: str | None) -> str:
    return clean_text(value, allow_newlines=True)


def clean_optional(value: str | None) -> str | None:
    cleaned = clean_single_line(value)
    return cleaned or None


def clean_token_values(values: Iterable[str] | None, *, max_items: int) -> list[str]:
    """Trim every token; reject an empty list, an oversized list, or a blank entry.

    Raises ``ValueError`` with a client-facing message.
    """
    items = list(values or [])
    if not items:
        raise ValueError("tokens must contain at least one value")
    if len(items) > max_items:
        raise ValueError(f"tokens can contain up to {max_items} values")
    cleaned: list[str] = []
    for item in items:
        token = (item or "").strip()
        if not token:
            raise ValueError("token value cannot be empty")
        cleaned.append(token)
    return cleaned
