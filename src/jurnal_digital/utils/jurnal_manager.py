"""Daily journal (jurnal harian) management.

Enforces the habit taxonomy, the one-entry-per-(siswa, tanggal, kebiasaan)
rule and the student snapshot copied onto each entry.
"""

import logging
from typing import List, Tuple

from sqlalchemy.orm import Session

from jurnal_digital.core.exceptions import ConflictError
from jurnal_digital.models.jurnal import JurnalModel
from jurnal_digital.models.siswa import SiswaModel
from jurnal_digital.schemas.jurnal import CreateJurnalRequest, JurnalQuery, UpdateJurnalRequest
from jurnal_digital.utils.repository import Repository

logger = logging.getLogger(__name__)

ENTRY_EXISTS = "Jurnal untuk kebiasaan ini sudah ada pada tanggal tersebut"


class JurnalManager:
    """Manages journal entries."""

    def __init__(self, db: Session):
        """Initialize JurnalManager.

        Args:
            db: SQLAlchemy Session.
        """
        self.db = db
        self.jurnal = Repository(
            db,
            JurnalModel,
            not_found_message="Jurnal tidak ditemukan",
            conflict_message=ENTRY_EXISTS,
        )
        self.siswa = Repository(db, SiswaModel, not_found_message="Siswa tidak ditemukan")

    def create_entry(self, req: CreateJurnalRequest, created_by: str) -> JurnalModel:
        """Create a journal entry for an existing student.

        Args:
            req: Validated entry payload.
            created_by: User id of the caller.

        Returns:
            The stored entry.

        Raises:
            NotFoundError: If the student does not exist.
            ConflictError: If the student already has an entry for this
                habit on this date.
        """
        siswa = self.siswa.find_by_id(req.siswa_id)

        kebiasaan = req.kebiasaan.value
        existing = self.jurnal.find_one(
            JurnalModel.siswa_id == siswa.id,
            JurnalModel.tanggal == req.tanggal,
            JurnalModel.kebiasaan == kebiasaan,
        )
        if existing:
            raise ConflictError(ENTRY_EXISTS)

        entry = JurnalModel(
            siswa_id=siswa.id,
            nama_siswa=siswa.nama_lengkap,
            kelas=siswa.kelas,
            jurusan=siswa.jurusan,
            tanggal=req.tanggal,
            kebiasaan=kebiasaan,
            aktivitas=req.aktivitas,
            refleksi=req.refleksi,
            nilai_karakter=req.nilai_karakter,
            foto_kegiatan=req.foto_kegiatan or None,
            catatan_guru=req.catatan_guru or "",
            status="submitted",
            created_by=created_by,
        )
        self.jurnal.create(entry)
        logger.info(
            "Created jurnal %s for siswa %s (%s, %s)",
            entry.id, siswa.id, kebiasaan, req.tanggal.isoformat(),
        )
        return entry

    def list_entries(
        self, query: JurnalQuery, page: int = 1, limit: int = 10
    ) -> Tuple[List[JurnalModel], int]:
        """List entries, newest date first."""
        filters = []
        if query.siswa_id:
            filters.append(JurnalModel.siswa_id == query.siswa_id)
        if query.kebiasaan:
            filters.append(JurnalModel.kebiasaan == query.kebiasaan)
        if query.kelas:
            filters.append(JurnalModel.kelas == query.kelas)
        if query.jurusan:
            filters.append(JurnalModel.jurusan == query.jurusan)
        if query.tanggal_mulai:
            filters.append(JurnalModel.tanggal >= query.tanggal_mulai)
        if query.tanggal_selesai:
            filters.append(JurnalModel.tanggal <= query.tanggal_selesai)
        return self.jurnal.list(
            filters=filters,
            order_by=[JurnalModel.tanggal.desc(), JurnalModel.created_at.desc()],
            page=page,
            limit=limit,
        )

    def get_entry(self, entry_id: str) -> JurnalModel:
        return self.jurnal.find_by_id(entry_id)

    def update_entry(self, entry_id: str, req: UpdateJurnalRequest) -> None:
        """Apply a partial update to the content fields of an entry."""
        patch = req.model_dump(exclude_unset=True, exclude_none=True)
        self.jurnal.update_partial(entry_id, patch)
        logger.info("Updated jurnal %s: %s", entry_id, sorted(patch))
