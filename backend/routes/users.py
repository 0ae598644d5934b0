# backend/routes/users.py
from typing import List

from fastapi import APIRouter, Depends, Request, status

from database import Database, get_db
from exceptions import DuplicateEmail
from models.users import User, ROLE_ADMIN
from schemas.user import UserCreate, UserCreated, UserResponse, user_to_out
from utils.audit import client_ip, write_log
from utils.hashing import get_password_hash
from utils.tokenJWT import get_current_user, role_required

router = APIRouter(prefix="/users", tags=["Users"])

admin_only = role_required(ROLE_ADMIN, message="Only admin can create users")


# Create a manager or employee inside the admin's company (Admin only)
@router.post("", response_model=UserCreated, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreate,
    request: Request,
    db: Database = Depends(get_db),
    current_user: User = Depends(admin_only),
):
    if db.identity.email_exists(payload.email):
        write_log(db, user_id=current_user.id, action="USER_CREATE", resource="users", status="FAIL",
                  ip=client_ip(request), meta={"email": payload.email, "reason": "Email exists"})
        raise DuplicateEmail(payload.email)

    user = db.identity.create_user(
        email=payload.email,
        password_hash=get_password_hash(payload.password),
        name=payload.name,
        role=payload.role,
        company_id=current_user.company_id,
        manager_id=payload.manager_id,
    )

    write_log(db, user_id=current_user.id, action="USER_CREATE", resource="users",
              ip=client_ip(request), meta={"created_user_id": user.id, "role": user.role})

    return UserCreated(user=user_to_out(user))


# List users in the caller's company
@router.get("", response_model=List[UserResponse])
def list_users(db: Database = Depends(get_db), current_user: User = Depends(get_current_user)):
    return [user_to_out(u) for u in db.identity.list_by_company(current_user.company_id)]
