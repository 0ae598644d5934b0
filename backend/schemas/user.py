from pydantic import BaseModel, Field
from typing import Literal, Optional

from schemas.company import CompanyOut

# Shared properties for user models
class UserBase(BaseModel):
    email: str

# Schema for user authentication credentials
class UserLogin(UserBase):
    password: str

# Schema for signup requests; creates a company and its admin
class UserSignup(UserBase):
    password: str
    name: str
    country: Optional[str] = None

# Schema for admin-created users; admin can only be granted at signup
class UserCreate(UserBase):
    password: str
    name: str
    role: Literal["manager", "employee"] = "employee"
    manager_id: Optional[str] = Field(None, alias="managerId")

    class Config:
        populate_by_name = True

# Output schema for user profile details, never carries the password hash
class UserResponse(UserBase):
    id: str
    name: str
    role: str
    company_id: Optional[str] = Field(None, alias="companyId")
    manager_id: Optional[str] = Field(None, alias="managerId")
    is_manager_approver: bool = Field(False, alias="isManagerApprover")

    class Config:
        from_attributes = True
        populate_by_name = True

# User as returned after signup/login, with the company embedded
class AuthUser(UserBase):
    id: str
    name: str
    role: str
    company: Optional[CompanyOut] = None

# Schema for session token responses
class Token(BaseModel):
    token: str
    user: AuthUser

# Wrapper returned by user creation
class UserCreated(BaseModel):
    user: UserResponse

# Schema for token payload contents
class TokenData(BaseModel):
    user_id: str = Field(alias="userId")
    email: str
    role: str

    class Config:
        populate_by_name = True


def user_to_out(user) -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email,
        name=user.name,
        role=user.role,
        company_id=user.company_id,
        manager_id=user.manager_id,
        is_manager_approver=user.is_manager_approver,
    )
