# utils/tokenJWT.py
from jose import jwt, JWTError
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from config import settings
from database import Database, get_db
from exceptions import Forbidden, InvalidToken, MissingToken
from models.users import User
from schemas.user import TokenData

# Missing headers are reported by get_token_data, not by FastAPI
bearer_scheme = HTTPBearer(auto_error=False)

# Generate a signed session token carrying the user's identity and role
def create_access_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {
        "userId": user.id,
        "email": user.email,
        "role": user.role,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

# Decode and validate a token; expiry is checked by jose
def verify_token(token: str) -> TokenData:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise InvalidToken()

    # Ensure identity claims are present in the token payload
    if not payload.get("userId") or not payload.get("email") or not payload.get("role"):
        raise InvalidToken()
    return TokenData(userId=payload["userId"], email=payload["email"], role=payload["role"])

def get_token_data(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenData:
    if credentials is None or not credentials.credentials:
        # A header with another scheme is a bad token, not a missing one
        if request.headers.get("Authorization"):
            raise InvalidToken()
        raise MissingToken()
    return verify_token(credentials.credentials)

# Retrieve the currently authenticated user based on the token
def get_current_user(
    token: TokenData = Depends(get_token_data),
    db: Database = Depends(get_db),
) -> User:
    user = db.identity.find_by_id(token.user_id)
    # Tokens outlive the in-memory store across restarts
    if user is None:
        raise InvalidToken()
    return user

# Dependency factory for Role-Based Access Control
def role_required(*allowed_roles, message: str = "Forbidden"):
    def _checker(current_user: User = Depends(get_current_user)) -> User:
        if allowed_roles and current_user.role not in allowed_roles:
            raise Forbidden(message)
        return current_user
    return _checker
