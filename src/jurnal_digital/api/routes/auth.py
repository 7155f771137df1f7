"""Authentication routes.

This module handles HTTP endpoints for user registration and login.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from jurnal_digital.core.dependencies import CurrentUserDep, UserManagerDep
from jurnal_digital.core.security import create_access_token
from jurnal_digital.core.validation import validated_body
from jurnal_digital.schemas.common import envelope
from jurnal_digital.schemas.user import LoginRequest, RegisterRequest, UserSummary

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _auth_payload(user) -> dict:
    token = create_access_token(user.id, user.username, user.role)
    return {"user": UserSummary.model_validate(user).model_dump(mode="json"), "token": token}


@router.post("/register", status_code=status.HTTP_201_CREATED, summary="Register a user")
def register(
    req: Annotated[RegisterRequest, Depends(validated_body(RegisterRequest))],
    user_manager: UserManagerDep,
) -> dict:
    """Register a new user and sign them in.

    Args:
        req: Validated registration payload.
        user_manager: Injected UserManager instance.

    Returns:
        Envelope with the user summary and an access token.
    """
    user = user_manager.register(req)
    return envelope(_auth_payload(user), message="User berhasil didaftarkan")


@router.post("/login", summary="Log in")
def login(
    req: Annotated[LoginRequest, Depends(validated_body(LoginRequest))],
    user_manager: UserManagerDep,
) -> dict:
    """Login with username (or email) and password.

    Unknown users and wrong passwords get the same 401.
    """
    user = user_manager.authenticate(req.username, req.password)
    return envelope(_auth_payload(user), message="Login berhasil")


@router.post("/logout", summary="Log out")
def logout() -> dict:
    """Tokens are stateless; the client discards its copy."""
    return envelope(message="Logout berhasil")


@router.get("/me", summary="Current user")
def me(current_user: CurrentUserDep, user_manager: UserManagerDep) -> dict:
    user = user_manager.get_user(current_user.user_id)
    return envelope({"user": UserSummary.model_validate(user).model_dump(mode="json")})
