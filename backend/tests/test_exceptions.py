from __future__ import annotations

import pytest

from findw.core.exceptions import (
    ErrorKind,
    IdentityTakenError,
    InternalError,
    InvalidInputError,
    NotFoundError,
    UnauthorizedError,
    error_response,
)


@pytest.mark.parametrize(
    ("error", "status_code", "code"),
    [
        (IdentityTakenError(), 409, "EMAIL_TAKEN"),
        (InvalidInputError(), 400, "BAD_REQUEST"),
        (UnauthorizedError(), 401, "UNAUTHORIZED"),
        (NotFoundError(), 404, "NOT_FOUND"),
        (InternalError(), 500, "INTERNAL"),
    ],
)
def test_every_kind_maps_to_one_status_and_code(error, status_code: int, code: str) -> None:  # noqa: ANN001
    assert error_response(error) == (status_code, {"error": code, "message": error.message})


def test_internal_error_never_echoes_detail() -> None:
    status_code, body = error_response(InternalError("db password is hunter2", details={"dsn": "secret"}))

    assert status_code == 500
    assert body == {"error": "INTERNAL", "message": "Internal server error"}


def test_details_are_included_for_client_errors() -> None:
    _, body = error_response(InvalidInputError("bad", details={"field": "email"}))

    assert body["details"] == {"field": "email"}


def test_each_error_class_pins_its_kind() -> None:
    assert IdentityTakenError.kind is ErrorKind.identity_taken
    assert UnauthorizedError.kind is ErrorKind.unauthorized
