# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""Pydantic request / response models for the user endpoints."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field

from models.user import UserRole


# -- Requests --------------------------------------------------------------


class RegisterRequest(BaseModel):
    username: str = Field(min_length=3, max_length=32)
    email: EmailStr
    password: str = Field(min_length=6, max_length=100)
    confirm: str = Field(min_length=6, max_length=100)
    role: Optional[UserRole] = None  # REPORTER when omitted


class LoginRequest(BaseModel):
    username: str
    password: str


class UpdateUserRequest(BaseModel):
    # Only fields present in the body are applied; an explicit null phone
    # number clears it.
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = Field(None, max_length=32)


# -- Responses -------------------------------------------------------------


class RegisterResponse(BaseModel):
    user_id: int
    username: str
    role: UserRole
    message: str


class LoginResponse(BaseModel):
    success: bool
    message: str
    username: Optional[str] = None
    user_id: Optional[int] = None
    role: Optional[UserRole] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    created_at: Optional[datetime] = None


class UserRow(BaseModel):
    id: int
    username: str
    email: str
    role: UserRole
    phone_number: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class UserListResponse(BaseModel):
    users: List[UserRow]
