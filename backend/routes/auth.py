# backend/routes/auth.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, status

from database import Database, get_db
from exceptions import DuplicateEmail, InvalidCredentials
from models.company import Company
from models.users import User
from schemas import user as schemas
from schemas.company import company_to_out
from utils.audit import client_ip, write_log
from utils.hashing import get_password_hash, verify_password
from utils.tokenJWT import create_access_token, get_current_user

router = APIRouter(prefix="/auth", tags=["Auth"])
logger = logging.getLogger(__name__)


def _auth_user(user: User, company: Optional[Company]) -> schemas.AuthUser:
    return schemas.AuthUser(
        id=user.id,
        email=user.email,
        name=user.name,
        role=user.role,
        company=company_to_out(company) if company else None,
    )


# Create a new company with the signing-up user as its admin
@router.post("/signup", response_model=schemas.Token, status_code=status.HTTP_201_CREATED)
def signup(payload: schemas.UserSignup, request: Request, db: Database = Depends(get_db)):
    logger.info("Signup attempt: %s", payload.email)

    # Check for existing user before hashing; the failure is audited against the existing account
    existing = db.identity.find_by_email(payload.email)
    if existing is not None:
        write_log(db, user_id=existing.id, action="SIGNUP", resource="auth", status="FAIL",
                  ip=client_ip(request), meta={"email": payload.email, "reason": "Email exists"})
        raise DuplicateEmail(payload.email)

    hashed_password = get_password_hash(payload.password)
    company, user = db.identity.signup(payload.email, hashed_password, payload.name, payload.country)

    write_log(db, user_id=user.id, action="SIGNUP", resource="auth",
              ip=client_ip(request), meta={"email": user.email, "company_id": company.id})
    logger.info("User created successfully: %s", user.email)

    return schemas.Token(token=create_access_token(user), user=_auth_user(user, company))


# Authenticate user and issue a session token
@router.post("/login", response_model=schemas.Token)
def login(payload: schemas.UserLogin, request: Request, db: Database = Depends(get_db)):
    user = db.identity.find_by_email(payload.email)

    # Validate credentials; failures against a known account are audited
    if user is None or not verify_password(payload.password, user.password_hash):
        if user is not None:
            write_log(db, user_id=user.id, action="LOGIN", resource="auth",
                      status="FAIL", ip=client_ip(request), meta={"email": payload.email})
        logger.warning("Failed login for: %s", payload.email)
        raise InvalidCredentials()

    company = db.identity.get_company(user.company_id)

    write_log(db, user_id=user.id, action="LOGIN", resource="auth",
              ip=client_ip(request), meta={"email": user.email})
    logger.info("Login successful for: %s", user.email)

    return schemas.Token(token=create_access_token(user), user=_auth_user(user, company))


# Retrieve current authenticated user details
@router.get("/me", response_model=schemas.AuthUser)
def me(current_user: User = Depends(get_current_user), db: Database = Depends(get_db)):
    return _auth_user(current_user, db.identity.get_company(current_user.company_id))
