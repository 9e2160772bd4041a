"""
Tests for JWT issuing and verification in Postboard Server

Tests round trips, tampering, foreign secrets, expiry and malformed tokens.
"""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from auth import TokenService
from exceptions import AuthFailure, VerificationFailure
from models.auth import TokenClaims

SECRET = "test-signing-secret"


def _FlipChar(token: str, index: int) -> str:
    """Replace one character of a token with a different one"""
    replacement = "A" if token[index] != "A" else "B"
    return token[:index] + replacement + token[index + 1:]


def test_issue_then_verify_returns_claims():
    """Verifying an issued token gives back the same claims"""
    service = TokenService(SECRET)

    for claims in [TokenClaims(id=1, email="john@mail.com"), TokenClaims(id=42, email="jane@example.org")]:
        assert service.VerifyToken(service.IssueToken(claims)) == claims


def test_token_has_no_expiry_by_default():
    """Tokens carry only id and email unless an expiry is configured"""
    token = TokenService(SECRET).IssueToken(TokenClaims(id=1, email="john@mail.com"))
    payload = jwt.get_unverified_claims(token)

    assert payload == {"id": 1, "email": "john@mail.com"}


def test_configured_expiry_adds_exp_claim():
    """With expiration_hours set the token carries an exp claim and still verifies"""
    service = TokenService(SECRET, expiration_hours=2)
    claims = TokenClaims(id=1, email="john@mail.com")
    token = service.IssueToken(claims)

    payload = jwt.get_unverified_claims(token)
    assert "exp" in payload
    assert payload["exp"] > datetime.now(timezone.utc).timestamp()
    assert service.VerifyToken(token) == claims


def test_tampered_token_fails():
    """Changing one character in the header, payload or signature breaks verification"""
    service = TokenService(SECRET)
    token = service.IssueToken(TokenClaims(id=1, email="john@mail.com"))
    header, payload, signature = token.split(".")

    positions = [
        len(header) // 2,
        len(header) + 1 + len(payload) // 2,
        len(header) + len(payload) + 2,
    ]
    for index in positions:
        with pytest.raises(VerificationFailure):
            service.VerifyToken(_FlipChar(token, index))


def test_token_from_other_secret_fails():
    """A token signed with a different secret is rejected"""
    token = TokenService("another-secret").IssueToken(TokenClaims(id=1, email="john@mail.com"))

    with pytest.raises(VerificationFailure):
        TokenService(SECRET).VerifyToken(token)


def test_token_with_other_algorithm_fails():
    """Only the configured algorithm is accepted"""
    token = jwt.encode({"id": 1, "email": "john@mail.com"}, SECRET, algorithm="HS512")

    with pytest.raises(VerificationFailure):
        TokenService(SECRET, algorithm="HS256").VerifyToken(token)


def test_expired_token_fails():
    """A token past its exp claim is rejected"""
    expired = datetime.now(timezone.utc) - timedelta(hours=1)
    token = jwt.encode({"id": 1, "email": "john@mail.com", "exp": expired}, SECRET, algorithm="HS256")

    with pytest.raises(VerificationFailure):
        TokenService(SECRET).VerifyToken(token)


def test_token_missing_claims_fails():
    """A correctly signed token without id/email is rejected"""
    token = jwt.encode({"email": "john@mail.com"}, SECRET, algorithm="HS256")

    with pytest.raises(VerificationFailure):
        TokenService(SECRET).VerifyToken(token)


def test_malformed_tokens_fail_uniformly():
    """Structural garbage raises the same failure type as a bad signature"""
    service = TokenService(SECRET)

    for token in ["", "abc123", "a.b", "a.b.c", "...", "not a token at all"]:
        with pytest.raises(VerificationFailure) as exc_info:
            service.VerifyToken(token)
        assert isinstance(exc_info.value, AuthFailure)
