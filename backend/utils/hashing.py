# backend/utils/hashing.py
import logging

from passlib.context import CryptContext

from config import settings
from exceptions import InternalFailure

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS)


# Hash a plaintext password with bcrypt
def get_password_hash(password: str) -> str:
    try:
        return pwd_context.hash(password)
    except (ValueError, TypeError) as exc:
        logger.error("Password hashing failed: %s", type(exc).__name__)
        raise InternalFailure("Error creating user") from exc


# Check a plaintext password against a stored hash
def verify_password(plain_password: str, password_hash: str) -> bool:
    try:
        return pwd_context.verify(plain_password, password_hash)
    except (ValueError, TypeError) as exc:
        logger.error("Password verification failed: %s", type(exc).__name__)
        raise InternalFailure("Authentication error") from exc
