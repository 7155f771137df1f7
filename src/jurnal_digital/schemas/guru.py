"""Guru (teacher) schema definitions."""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict

from jurnal_digital.core.validation import Email, Length, OneOf, Required, Rules
from jurnal_digital.schemas.siswa import STATUSES


class CreateGuruRequest(BaseModel):
    RULES: ClassVar[Rules] = {
        "nip": [Required("NIP wajib diisi"), Length(min=8, max=20, message="NIP harus 8-20 karakter")],
        "nama_lengkap": [Required("Nama wajib diisi"), Length(min=3, message="Nama minimal 3 karakter")],
        "email": [Email()],
    }

    nip: str
    nama_lengkap: str
    email: Optional[str] = None
    no_hp: Optional[str] = None
    mata_pelajaran: Optional[str] = None
    jenis_kelamin: Optional[str] = None
    alamat: Optional[str] = None


class UpdateGuruRequest(BaseModel):
    RULES: ClassVar[Rules] = {
        "nama_lengkap": [Length(min=3, message="Nama minimal 3 karakter")],
        "email": [Email()],
        "status": [OneOf(STATUSES, message="Status tidak valid")],
    }

    nama_lengkap: Optional[str] = None
    email: Optional[str] = None
    no_hp: Optional[str] = None
    mata_pelajaran: Optional[str] = None
    jenis_kelamin: Optional[str] = None
    alamat: Optional[str] = None
    status: Optional[str] = None


class Guru(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    nip: str
    nama_lengkap: str
    email: Optional[str] = None
    no_hp: Optional[str] = None
    mata_pelajaran: Optional[str] = None
    jenis_kelamin: Optional[str] = None
    alamat: Optional[str] = None
    status: str
    created_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime
