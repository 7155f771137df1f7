"""Jurnal harian schema definitions.

Entries are tagged with one of the seven habits of the
"7 Kebiasaan Anak Indonesia Hebat" programme. The set is closed.
"""

from datetime import date, datetime
from enum import Enum
from typing import ClassVar, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from jurnal_digital.core.validation import (
    IntRange,
    IsoDate,
    Length,
    ObjectId,
    OneOf,
    Required,
    Rules,
    parse_iso_date,
)


class Kebiasaan(str, Enum):
    RELIGIUS = "Religius"
    NASIONALIS = "Nasionalis"
    MANDIRI = "Mandiri"
    GOTONG_ROYONG = "Gotong Royong"
    INTEGRITAS = "Integritas"
    KREATIF = "Kreatif"
    BERNALAR_KRITIS = "Bernalar Kritis"


KEBIASAAN_LIST: List[str] = [k.value for k in Kebiasaan]

AKTIVITAS_RULE = Length(min=10, message="Aktivitas minimal 10 karakter")
REFLEKSI_RULE = Length(min=20, message="Refleksi minimal 20 karakter")
NILAI_RULE = IntRange(1, 5, message="Nilai karakter 1-5")


class CreateJurnalRequest(BaseModel):
    RULES: ClassVar[Rules] = {
        "siswa_id": [Required("ID siswa wajib diisi"), ObjectId("ID siswa tidak valid")],
        "tanggal": [Required("Tanggal wajib diisi"), IsoDate()],
        "kebiasaan": [Required("Kebiasaan wajib diisi"), OneOf(KEBIASAAN_LIST, message="Kebiasaan tidak valid")],
        "aktivitas": [Required("Aktivitas wajib diisi"), AKTIVITAS_RULE],
        "refleksi": [Required("Refleksi wajib diisi"), REFLEKSI_RULE],
        "nilai_karakter": [Required("Nilai karakter wajib diisi"), NILAI_RULE],
    }

    siswa_id: str
    tanggal: date
    kebiasaan: Kebiasaan
    aktivitas: str
    refleksi: str
    nilai_karakter: int
    foto_kegiatan: Optional[str] = None
    catatan_guru: Optional[str] = None

    @field_validator("tanggal", mode="before")
    @classmethod
    def parse_tanggal(cls, value):
        return parse_iso_date(value)


class UpdateJurnalRequest(BaseModel):
    """Partial update of the content fields; identity fields are fixed."""

    RULES: ClassVar[Rules] = {
        "aktivitas": [AKTIVITAS_RULE],
        "refleksi": [REFLEKSI_RULE],
        "nilai_karakter": [NILAI_RULE],
    }

    aktivitas: Optional[str] = None
    refleksi: Optional[str] = None
    nilai_karakter: Optional[int] = None
    foto_kegiatan: Optional[str] = None
    catatan_guru: Optional[str] = None


class JurnalQuery(BaseModel):
    """Filters accepted by the journal listing."""

    RULES: ClassVar[Rules] = {
        "siswa_id": [ObjectId("ID siswa tidak valid")],
        "tanggal_mulai": [IsoDate("Format tanggal mulai tidak valid")],
        "tanggal_selesai": [IsoDate("Format tanggal selesai tidak valid")],
        "kebiasaan": [OneOf(KEBIASAAN_LIST, message="Kebiasaan tidak valid")],
    }

    siswa_id: Optional[str] = None
    tanggal_mulai: Optional[date] = None
    tanggal_selesai: Optional[date] = None
    kebiasaan: Optional[str] = None
    kelas: Optional[str] = None
    jurusan: Optional[str] = None

    @field_validator("tanggal_mulai", "tanggal_selesai", mode="before")
    @classmethod
    def parse_range(cls, value):
        if value is None or value == "":
            return None
        return parse_iso_date(value)

    @field_validator("siswa_id", "kebiasaan", "kelas", "jurusan", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        return value or None


class Jurnal(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    siswa_id: str
    nama_siswa: str
    kelas: str
    jurusan: str
    tanggal: date
    kebiasaan: str
    aktivitas: str
    refleksi: str
    nilai_karakter: int
    foto_kegiatan: Optional[str] = None
    catatan_guru: str
    status: str
    created_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime
