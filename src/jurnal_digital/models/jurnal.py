"""Daily journal entry model."""

from sqlalchemy import Column, Date, DateTime, Integer, String, Text, UniqueConstraint

from .base import Base, new_object_id, utcnow


class JurnalModel(Base):
    """One student's reflection on one habit for one calendar day."""

    __tablename__ = "jurnal_harian"
    __table_args__ = (
        UniqueConstraint(
            "siswa_id",
            "tanggal",
            "kebiasaan",
            name="uq_jurnal_harian_siswa_tanggal_kebiasaan",
        ),
    )

    id = Column(String(24), primary_key=True, default=new_object_id)
    # checked against siswa in application code, no database foreign key
    siswa_id = Column(String(24), index=True, nullable=False)
    nama_siswa = Column(String, nullable=False)
    kelas = Column(String, index=True, nullable=False)
    jurusan = Column(String, index=True, nullable=False)
    tanggal = Column(Date, index=True, nullable=False)
    kebiasaan = Column(String, index=True, nullable=False)
    aktivitas = Column(Text, nullable=False)
    refleksi = Column(Text, nullable=False)
    nilai_karakter = Column(Integer, nullable=False)
    foto_kegiatan = Column(String, nullable=True)
    catatan_guru = Column(Text, nullable=False, default="")
    status = Column(String, nullable=False, default="submitted")
    created_by = Column(String(24), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
