from __future__ import annotations

import pytest
from jose import jwt

from conftest import FakeClock
from userapi.application.services.tokens import (TOKEN_LIFETIME, JwtTokenService,
                                                 TokenSettings)
from userapi.domain.users.exceptions import InvalidTokenError, TokenConfigurationError

SEVEN_HOURS = 7 * 60 * 60


def test_issue_then_verify(token_service: JwtTokenService, clock: FakeClock) -> None:
    token = token_service.issue(42)

    claims = token_service.verify(token)

    assert claims.user_id == "42"
    assert claims.issued_at == int(clock.now)
    assert claims.expires_at - claims.issued_at == SEVEN_HOURS


def test_header_and_claim_shape(token_service: JwtTokenService) -> None:
    token = token_service.issue(7)

    header = jwt.get_unverified_header(token)
    claims = jwt.get_unverified_claims(token)

    assert header["alg"] == "HS256"
    assert header["typ"] == "JWT"
    assert set(claims) == {"user_id", "iat", "exp"}
    assert TOKEN_LIFETIME.total_seconds() == SEVEN_HOURS


def test_token_is_valid_until_expiration(token_service: JwtTokenService, clock: FakeClock) -> None:
    token = token_service.issue(1)

    clock.advance(SEVEN_HOURS)
    assert token_service.verify(token).user_id == "1"

    clock.advance(1)
    with pytest.raises(InvalidTokenError):
        token_service.verify(token)


def test_token_issued_in_the_future_is_rejected(
    token_service: JwtTokenService, clock: FakeClock
) -> None:
    token = token_service.issue(1)

    clock.advance(-60)

    with pytest.raises(InvalidTokenError):
        token_service.verify(token)


def test_tampered_token_is_rejected(token_service: JwtTokenService) -> None:
    token = token_service.issue(1)
    position = token.index(".") + 5
    replacement = "A" if token[position] != "A" else "B"
    tampered = token[:position] + replacement + token[position + 1:]

    with pytest.raises(InvalidTokenError):
        token_service.verify(tampered)


def test_token_signed_with_another_secret_is_rejected(
    token_service: JwtTokenService, clock: FakeClock
) -> None:
    other = JwtTokenService(TokenSettings(secret="someone-else"), clock=clock)

    with pytest.raises(InvalidTokenError):
        token_service.verify(other.issue(1))


def test_other_algorithms_are_rejected(token_service: JwtTokenService, clock: FakeClock) -> None:
    now = int(clock.now)
    token = jwt.encode(
        {"user_id": "1", "iat": now, "exp": now + 60},
        "unit-test-secret",
        algorithm="HS512",
    )

    with pytest.raises(InvalidTokenError):
        token_service.verify(token)


@pytest.mark.parametrize("claims", [{"iat": 0}, {"user_id": "1"}, {"user_id": "", "iat": 0}])
def test_missing_claims_are_rejected(
    token_service: JwtTokenService, clock: FakeClock, claims: dict
) -> None:
    now = int(clock.now)
    payload = {**claims, "exp": now + 60}
    if "iat" in payload:
        payload["iat"] = now
    token = jwt.encode(payload, "unit-test-secret", algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        token_service.verify(token)


@pytest.mark.parametrize("garbage", ["", "not-a-token", "a.b.c", "Bearer x.y.z"])
def test_malformed_tokens_are_rejected(token_service: JwtTokenService, garbage: str) -> None:
    with pytest.raises(InvalidTokenError):
        token_service.verify(garbage)


def test_missing_secret_fails_closed(clock: FakeClock) -> None:
    unconfigured = JwtTokenService(TokenSettings(secret=None), clock=clock)
    configured = JwtTokenService(TokenSettings(secret="unit-test-secret"), clock=clock)

    with pytest.raises(TokenConfigurationError):
        unconfigured.issue(1)
    with pytest.raises(InvalidTokenError):
        unconfigured.verify(configured.issue(1))


def test_settings_are_immutable() -> None:
    settings = TokenSettings(secret="a")

    with pytest.raises(AttributeError):
        settings.secret = "b"  # type: ignore[misc]
