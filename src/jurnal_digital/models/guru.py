from sqlalchemy import Column, DateTime, String

from .base import Base, new_object_id, utcnow


class GuruModel(Base):
    __tablename__ = "guru"

    id = Column(String(24), primary_key=True, default=new_object_id)
    nip = Column(String(20), unique=True, index=True, nullable=False)
    nama_lengkap = Column(String, index=True, nullable=False)
    email = Column(String, index=True, nullable=True)
    no_hp = Column(String, nullable=True)
    mata_pelajaran = Column(String, index=True, nullable=True)
    jenis_kelamin = Column(String, nullable=True)
    alamat = Column(String, nullable=True)
    status = Column(String, index=True, nullable=False, default="active")
    created_by = Column(String(24), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
