"""Siswa (student) schema definitions."""

from datetime import date, datetime
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from jurnal_digital.core.validation import (
    Email,
    IsoDate,
    Length,
    NotBlank,
    OneOf,
    Required,
    Rules,
    parse_iso_date,
)

STATUSES = ("active", "inactive")

# filters of the siswa and guru listings
STATUS_FILTER_RULES: Rules = {"status": [OneOf(STATUSES, message="Status tidak valid")]}


class _TanggalLahirMixin(BaseModel):
    tanggal_lahir: Optional[date] = None

    @field_validator("tanggal_lahir", mode="before")
    @classmethod
    def parse_tanggal_lahir(cls, value):
        if value is None or value == "":
            return None
        return parse_iso_date(value)


class CreateSiswaRequest(_TanggalLahirMixin):
    RULES: ClassVar[Rules] = {
        "nis": [Required("NIS wajib diisi"), Length(min=8, max=10, message="NIS harus 8-10 karakter")],
        "nama_lengkap": [Required("Nama wajib diisi"), Length(min=3, message="Nama minimal 3 karakter")],
        "kelas": [Required("Kelas wajib diisi")],
        "jurusan": [Required("Jurusan wajib diisi")],
        "email": [Email()],
        "tanggal_lahir": [IsoDate("Format tanggal lahir tidak valid")],
    }

    nis: str
    nama_lengkap: str
    kelas: str
    jurusan: str
    email: Optional[str] = None
    no_hp: Optional[str] = None
    alamat: Optional[str] = None
    jenis_kelamin: Optional[str] = None
    nama_orang_tua: Optional[str] = None
    no_hp_orang_tua: Optional[str] = None


class UpdateSiswaRequest(_TanggalLahirMixin):
    """Partial update; NIS cannot be changed."""

    RULES: ClassVar[Rules] = {
        "nama_lengkap": [Length(min=3, message="Nama minimal 3 karakter")],
        "kelas": [NotBlank("Kelas wajib diisi")],
        "jurusan": [NotBlank("Jurusan wajib diisi")],
        "email": [Email()],
        "tanggal_lahir": [IsoDate("Format tanggal lahir tidak valid")],
        "status": [OneOf(STATUSES, message="Status tidak valid")],
    }

    nama_lengkap: Optional[str] = None
    kelas: Optional[str] = None
    jurusan: Optional[str] = None
    email: Optional[str] = None
    no_hp: Optional[str] = None
    alamat: Optional[str] = None
    jenis_kelamin: Optional[str] = None
    nama_orang_tua: Optional[str] = None
    no_hp_orang_tua: Optional[str] = None
    status: Optional[str] = None


class Siswa(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    nis: str
    nama_lengkap: str
    kelas: str
    jurusan: str
    email: Optional[str] = None
    no_hp: Optional[str] = None
    alamat: Optional[str] = None
    tanggal_lahir: Optional[date] = None
    jenis_kelamin: Optional[str] = None
    nama_orang_tua: Optional[str] = None
    no_hp_orang_tua: Optional[str] = None
    status: str
    created_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class HabitStatistic(BaseModel):
    """Journal totals for one habit of one student."""

    kebiasaan: str
    total_entries: int
    avg_nilai: float
