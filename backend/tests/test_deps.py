from __future__ import annotations

import pytest

from findw.core.deps import parse_bearer


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("Bearer abc.def", "abc.def"),
        ("bearer abc.def", "abc.def"),
        ("BEARER abc.def", "abc.def"),
        ("Bearer   abc.def  ", "abc.def"),
    ],
)
def test_bearer_scheme_is_matched_case_insensitively(header: str, expected: str) -> None:
    assert parse_bearer(header) == expected


@pytest.mark.parametrize("header", [None, "", "abc.def", "Basic abc.def", "Bearer", "Bearer ", "Bearerabc.def"])
def test_header_without_bearer_token_yields_nothing(header: str | None) -> None:
    assert parse_bearer(header) is None
