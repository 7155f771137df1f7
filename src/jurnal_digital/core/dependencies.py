"""Dependency injection module for FastAPI.

This module provides request-scoped manager instances and the type aliases
routes use to declare them.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from jurnal_digital.core.database import get_db
from jurnal_digital.core.security import get_current_user
from jurnal_digital.schemas.user import CurrentUser
from jurnal_digital.utils.guru_manager import GuruManager
from jurnal_digital.utils.jurnal_manager import JurnalManager
from jurnal_digital.utils.siswa_manager import SiswaManager
from jurnal_digital.utils.user_manager import UserManager


def get_user_manager(db: Session = Depends(get_db)) -> UserManager:
    """Get UserManager instance with request-scoped DB session.

    Args:
        db: Database session.

    Returns:
        UserManager instance.
    """
    return UserManager(db)


def get_siswa_manager(db: Session = Depends(get_db)) -> SiswaManager:
    """Get SiswaManager instance with request-scoped DB session."""
    return SiswaManager(db)


def get_guru_manager(db: Session = Depends(get_db)) -> GuruManager:
    """Get GuruManager instance with request-scoped DB session."""
    return GuruManager(db)


def get_jurnal_manager(db: Session = Depends(get_db)) -> JurnalManager:
    """Get JurnalManager instance with request-scoped DB session."""
    return JurnalManager(db)


# Type aliases for dependency injection
UserManagerDep = Annotated[UserManager, Depends(get_user_manager)]
SiswaManagerDep = Annotated[SiswaManager, Depends(get_siswa_manager)]
GuruManagerDep = Annotated[GuruManager, Depends(get_guru_manager)]
JurnalManagerDep = Annotated[JurnalManager, Depends(get_jurnal_manager)]
CurrentUserDep = Annotated[CurrentUser, Depends(get_current_user)]
