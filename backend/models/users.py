# backend/models/users.py
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from models.ids import new_id

ROLE_ADMIN = "admin"
ROLE_MANAGER = "manager"
ROLE_EMPLOYEE = "employee"

ROLES = (ROLE_ADMIN, ROLE_MANAGER, ROLE_EMPLOYEE)
APPROVER_ROLES = (ROLE_ADMIN, ROLE_MANAGER)


# Represents a user account with authentication details and company role
@dataclass(frozen=True)
class User:
    email: str
    password_hash: str
    name: str
    role: str
    company_id: str
    manager_id: Optional[str] = None
    is_manager_approver: bool = False
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_approver(self) -> bool:
        return self.role in APPROVER_ROLES
