from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from config import settings
from exceptions import InvalidToken
from models.users import User
from utils.hashing import get_password_hash, verify_password
from utils.tokenJWT import create_access_token, verify_token


@pytest.fixture
def user():
    return User(email="a@co.com", password_hash="x", name="Alice", role="admin", company_id="c1")


def test_round_trip_claims(user):
    data = verify_token(create_access_token(user))
    assert (data.user_id, data.email, data.role) == (user.id, user.email, user.role)


def test_default_lifetime_is_seven_days(user):
    payload = jwt.decode(create_access_token(user), settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    lifetime = payload["exp"] - payload["iat"]
    assert lifetime == 7 * 24 * 60 * 60


def test_expired_token_rejected(user):
    token = create_access_token(user, expires_delta=timedelta(seconds=-10))
    with pytest.raises(InvalidToken):
        verify_token(token)


def test_wrong_key_rejected(user):
    forged = jwt.encode(
        {"userId": user.id, "email": user.email, "role": "admin",
         "exp": datetime.now(timezone.utc) + timedelta(days=1)},
        "some-other-key",
        algorithm="HS256",
    )
    with pytest.raises(InvalidToken):
        verify_token(forged)


def test_missing_claims_rejected():
    token = jwt.encode(
        {"email": "a@co.com", "exp": datetime.now(timezone.utc) + timedelta(days=1)},
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
    )
    with pytest.raises(InvalidToken):
        verify_token(token)


def test_garbage_rejected():
    with pytest.raises(InvalidToken):
        verify_token("not-a-token")


def test_password_hash_never_plaintext():
    hashed = get_password_hash("pw1")
    assert hashed != "pw1"
    assert verify_password("pw1", hashed)
    assert not verify_password("pw2", hashed)
