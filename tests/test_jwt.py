"""
Tests for token issuance and verification.
"""

import time
import uuid

import jwt as pyjwt
import pytest

from auth.jwt import TokenService
from core.errors import InvalidToken

SECRET = "unit-test-secret-0123456789-abcdefghijklmnop"
OTHER_SECRET = "another-secret-0123456789-abcdefghijklmnopq"


def _user_id() -> str:
    return str(uuid.uuid4())


class TestIssue:
    def test_roundtrip(self):
        service = TokenService(SECRET)
        user_id = _user_id()
        assert service.verify(service.issue(user_id)) == user_id

    def test_claims_without_expiry(self):
        token = TokenService(SECRET, expiry_seconds=0).issue(_user_id())
        payload = pyjwt.decode(token, options={"verify_signature": False})
        assert "user_id" in payload
        assert "iat" in payload
        assert "exp" not in payload

    def test_expiry_claim_when_configured(self):
        token = TokenService(SECRET, expiry_seconds=60).issue(_user_id())
        payload = pyjwt.decode(token, options={"verify_signature": False})
        assert payload["exp"] - payload["iat"] == 60

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError):
            TokenService("")


class TestVerify:
    def test_wrong_secret(self):
        token = TokenService(OTHER_SECRET).issue(_user_id())
        with pytest.raises(InvalidToken):
            TokenService(SECRET).verify(token)

    def test_tampered_payload(self):
        service = TokenService(SECRET)
        header, payload, signature = service.issue(_user_id()).split(".")
        forged = pyjwt.encode({"user_id": _user_id()}, OTHER_SECRET, algorithm="HS256")
        forged_payload = forged.split(".")[1]
        with pytest.raises(InvalidToken):
            service.verify(f"{header}.{forged_payload}.{signature}")

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c", "a.b"])
    def test_malformed(self, token):
        with pytest.raises(InvalidToken):
            TokenService(SECRET).verify(token)

    def test_expired(self):
        token = pyjwt.encode(
            {"user_id": _user_id(), "exp": int(time.time()) - 10},
            SECRET,
            algorithm="HS256",
        )
        with pytest.raises(InvalidToken):
            TokenService(SECRET).verify(token)

    def test_missing_user_id_claim(self):
        token = pyjwt.encode({"sub": _user_id()}, SECRET, algorithm="HS256")
        with pytest.raises(InvalidToken):
            TokenService(SECRET).verify(token)

    def test_non_uuid_user_id_claim(self):
        token = pyjwt.encode({"user_id": "42"}, SECRET, algorithm="HS256")
        with pytest.raises(InvalidToken):
            TokenService(SECRET).verify(token)

    def test_unsigned_token_rejected(self):
        token = pyjwt.encode({"user_id": _user_id()}, None, algorithm="none")
        with pytest.raises(InvalidToken):
            TokenService(SECRET).verify(token)
