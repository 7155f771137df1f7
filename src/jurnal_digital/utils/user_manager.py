"""User management utilities.

This module provides account registration and credential checks on top of
the ``users`` table.
"""

import logging

from sqlalchemy import or_
from sqlalchemy.orm import Session

from jurnal_digital.core.exceptions import AlreadyRegisteredError, UnauthorizedError
from jurnal_digital.core.security import hash_password, verify_password
from jurnal_digital.models.base import utcnow
from jurnal_digital.models.user import UserModel
from jurnal_digital.schemas.user import RegisterRequest
from jurnal_digital.utils.repository import Repository

logger = logging.getLogger(__name__)

ALREADY_REGISTERED = "Username atau email sudah terdaftar"
INVALID_CREDENTIALS = "Username atau password salah"


class UserManager:
    """Manages user data persistence and authentication."""

    def __init__(self, db: Session):
        """Initialize UserManager.

        Args:
            db: SQLAlchemy Session.
        """
        self.db = db
        self.users = Repository(
            db,
            UserModel,
            not_found_message="User tidak ditemukan",
            conflict_message=ALREADY_REGISTERED,
        )

    def register(self, req: RegisterRequest) -> UserModel:
        """Create a new account.

        Args:
            req: Validated registration payload.

        Returns:
            The stored user.

        Raises:
            AlreadyRegisteredError: If the username or email is taken.
        """
        existing = self.users.find_one(
            or_(UserModel.username == req.username, UserModel.email == req.email)
        )
        if existing:
            raise AlreadyRegisteredError(ALREADY_REGISTERED)

        user = UserModel(
            username=req.username,
            email=req.email,
            password_hash=hash_password(req.password),
            role=req.role,
            nama_lengkap=req.nama_lengkap or req.username,
            status="active",
        )
        # a concurrent registration can still slip past the check above
        self.users.create(user, conflict_error=AlreadyRegisteredError)
        logger.info("Registered user %s with role %s", user.username, user.role)
        return user

    def authenticate(self, identifier: str, password: str) -> UserModel:
        """Check credentials and record the login time.

        Args:
            identifier: Username or email address.
            password: Plain text password.

        Returns:
            The authenticated user.

        Raises:
            UnauthorizedError: Same message for unknown user and wrong password.
        """
        user = self.users.find_one(
            or_(UserModel.username == identifier, UserModel.email == identifier)
        )
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt for %s", identifier)
            raise UnauthorizedError(INVALID_CREDENTIALS)

        user.last_login = utcnow()
        self.db.commit()
        self.db.refresh(user)
        return user

    def get_user(self, user_id: str) -> UserModel:
        return self.users.find_by_id(user_id)
