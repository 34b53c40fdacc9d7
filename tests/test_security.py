from datetime import timedelta

import pytest
from jose import ExpiredSignatureError, JWTError

from scrolloff_api.security.password import hash_password, is_legacy_hash, verify_password
from scrolloff_api.security.tokens import JWTSettings, create_access_token, decode_token

SETTINGS = JWTSettings(secret="unit-secret")


def test_hash_and_verify():
    hashed = hash_password("s3cret")
    assert hashed.startswith("$2")
    assert not is_legacy_hash(hashed)
    assert verify_password("s3cret", hashed)
    assert not verify_password("other", hashed)


def test_plaintext_fallback():
    assert is_legacy_hash("s3cret")
    assert verify_password("s3cret", "s3cret")
    assert not verify_password("s3cre", "s3cret")
    assert not verify_password("anything", None)


def test_token_claims():
    token = create_access_token(identity_id=7, role="user", claims={"email": "a@b.c"}, settings=SETTINGS)
    decoded = decode_token(token, SETTINGS)
    assert decoded["id"] == 7
    assert decoded["sub"] == "7"
    assert decoded["email"] == "a@b.c"
    assert decoded["iss"] == "scrolloff-api"
    assert decoded["exp"] - decoded["iat"] == int(timedelta(days=30).total_seconds())


def test_expired_token():
    expired = JWTSettings(secret="unit-secret", ttl=timedelta(seconds=-10))
    token = create_access_token(identity_id=1, role="admin", settings=expired)
    with pytest.raises(ExpiredSignatureError):
        decode_token(token, SETTINGS)


def test_wrong_secret():
    token = create_access_token(identity_id=1, role="admin", settings=SETTINGS)
    with pytest.raises(JWTError):
        decode_token(token, JWTSettings(secret="other"))
