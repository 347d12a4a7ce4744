# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""
User endpoints – list, register, login, profile update.

Security notes
--------------
* Login returns the *same* message whether the username doesn't exist or
  the password is wrong.  This prevents user-enumeration attacks.
* Only a database fault turns a login into a 500; a credential mismatch is
  a plain 401 with ``success = false``.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import get_db
from core.logger import logger
from core.security import PasswordHasher, get_acting_user_id, get_client_ip, get_password_hasher
from repositories.audit_log_repository import AuditLogRepository
from repositories.user_repository import UserRepository
from users.service import UNSET, UserDirectory
from users.schemas import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UpdateUserRequest,
    UserListResponse,
    UserRow,
)

router = APIRouter(prefix="/api/user", tags=["user"])

# Generic message used for both "no such username" and "wrong password"
_LOGIN_FAIL = "Invalid username or password"


def get_user_directory(
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserDirectory:
    return UserDirectory(UserRepository(db), hasher)


# ---------------------------------------------------------------------------
# GET /api/user  – list all users
# ---------------------------------------------------------------------------


@router.get("", response_model=UserListResponse)
def list_users(directory: UserDirectory = Depends(get_user_directory)):
    """Return every user row (no password data – handled by the schema)."""
    return UserListResponse(users=directory.list_users())


# ---------------------------------------------------------------------------
# POST /api/user/register
# ---------------------------------------------------------------------------


@router.post("/register", response_model=RegisterResponse)
def register(
    body: RegisterRequest,
    request: Request,
    directory: UserDirectory = Depends(get_user_directory),
    db: Session = Depends(get_db),
):
    user = directory.register(body.username, body.email, body.password, body.confirm, body.role)
    AuditLogRepository(db).record(
        "register",
        actor_id=user.id,
        target_user_id=user.id,
        detail=f"role={user.role.value}",
        request_ip=get_client_ip(request),
    )
    return RegisterResponse(
        user_id=user.id,
        username=user.username,
        role=user.role,
        message="Registration successful",
    )


# ---------------------------------------------------------------------------
# POST /api/user/login
# ---------------------------------------------------------------------------


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    request: Request,
    directory: UserDirectory = Depends(get_user_directory),
    db: Session = Depends(get_db),
):
    try:
        user = directory.login(body.username, body.password)
    except SQLAlchemyError:
        logger.exception("Login lookup failed for username=%s", body.username)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=LoginResponse(success=False, message="Login failed: internal error").model_dump(),
        )

    if user is None:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=LoginResponse(success=False, message=_LOGIN_FAIL).model_dump(),
        )

    AuditLogRepository(db).record(
        "login",
        actor_id=user.id,
        target_user_id=user.id,
        request_ip=get_client_ip(request),
    )
    return LoginResponse(
        success=True,
        message="Login successful",
        username=user.username,
        user_id=user.id,
        role=user.role,
        email=user.email,
        phone_number=user.phone_number,
        created_at=user.created_at,
    )


# ---------------------------------------------------------------------------
# PUT /api/user/{id}  – update email / phone number
# ---------------------------------------------------------------------------


@router.put("/{user_id}", response_model=UserRow)
def update_user(
    user_id: int,
    body: UpdateUserRequest,
    request: Request,
    acting_user_id: Optional[int] = Depends(get_acting_user_id),
    directory: UserDirectory = Depends(get_user_directory),
    db: Session = Depends(get_db),
):
    supplied = body.model_fields_set
    user = directory.update_profile(
        user_id,
        email=body.email if "email" in supplied else UNSET,
        phone_number=body.phone_number if "phone_number" in supplied else UNSET,
    )
    AuditLogRepository(db).record(
        "update_profile",
        actor_id=acting_user_id,
        target_user_id=user.id,
        detail="fields=" + ",".join(sorted(supplied)),
        request_ip=get_client_ip(request),
    )
    return user
