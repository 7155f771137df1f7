"""User schema definitions."""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict

from jurnal_digital.core.validation import Email, Length, OneOf, Required, Rules

ROLES = ("admin", "teacher", "student")


class RegisterRequest(BaseModel):
    RULES: ClassVar[Rules] = {
        "username": [Required("Username wajib diisi"), Length(min=3, message="Username minimal 3 karakter")],
        "email": [Required("Email wajib diisi"), Email()],
        "password": [Required("Password wajib diisi"), Length(min=6, message="Password minimal 6 karakter")],
        "role": [Required("Role wajib diisi"), OneOf(ROLES, message="Role tidak valid")],
    }

    username: str
    email: str
    password: str
    role: str
    nama_lengkap: Optional[str] = None


class LoginRequest(BaseModel):
    """Username may also be the account's email address."""

    RULES: ClassVar[Rules] = {
        "username": [Required("Username wajib diisi")],
        "password": [Required("Password wajib diisi")],
    }

    username: str
    password: str


class UserSummary(BaseModel):
    """Public view of an account; never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: str
    role: str
    nama_lengkap: str
    status: str
    last_login: Optional[datetime] = None


class CurrentUser(BaseModel):
    """Identity carried by a verified access token."""

    user_id: str
    username: str
    role: str
