"""Tests for token handling and role predicates."""

import pytest

from ticketing_api.app.core.security import (
    ADMIN_ROLES,
    create_access_token,
    decode_access_token,
    has_role,
)


def test_token_round_trip_keeps_claims():
    token = create_access_token({"sub": "12"})
    claims = decode_access_token(token)
    assert claims["sub"] == "12"
    assert "exp" in claims


def test_tampered_token_is_rejected():
    header, payload, signature = create_access_token({"sub": "12"}).split(".")
    forged = create_access_token({"sub": "1"}).split(".")[1]
    assert decode_access_token(f"{header}.{forged}.{signature}") is None


def test_expired_token_is_rejected():
    assert decode_access_token(create_access_token({"sub": "12"}, expires_delta=-60)) is None


@pytest.mark.parametrize("token", ["", "abc", "a.b", "a.b.c.d"])
def test_malformed_token_is_rejected(token):
    assert decode_access_token(token) is None


@pytest.mark.parametrize(
    "role,allowed,expected",
    [
        ("admin", ADMIN_ROLES, True),
        ("superadmin", ADMIN_ROLES, True),
        ("user", ADMIN_ROLES, False),
        (None, ADMIN_ROLES, False),
        ("admin", ("admin",), True),
        ("superadmin", ("admin",), False),
        ("user", (), False),
    ],
)
def test_has_role(role, allowed, expected):
    assert has_role(role, allowed) is expected
