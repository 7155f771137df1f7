from sqlalchemy import Column, Date, DateTime, String

from .base import Base, new_object_id, utcnow


class SiswaModel(Base):
    __tablename__ = "siswa"

    id = Column(String(24), primary_key=True, default=new_object_id)
    nis = Column(String(10), unique=True, index=True, nullable=False)
    nama_lengkap = Column(String, index=True, nullable=False)
    kelas = Column(String, index=True, nullable=False)
    jurusan = Column(String, index=True, nullable=False)
    email = Column(String, nullable=True)
    no_hp = Column(String, nullable=True)
    alamat = Column(String, nullable=True)
    tanggal_lahir = Column(Date, nullable=True)
    jenis_kelamin = Column(String, nullable=True)
    nama_orang_tua = Column(String, nullable=True)
    no_hp_orang_tua = Column(String, nullable=True)
    status = Column(String, index=True, nullable=False, default="active")
    created_by = Column(String(24), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
