"""Student (siswa) management utilities."""

import logging
from typing import List, Optional, Tuple

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from jurnal_digital.core.exceptions import AlreadyRegisteredError
from jurnal_digital.models.jurnal import JurnalModel
from jurnal_digital.models.siswa import SiswaModel
from jurnal_digital.schemas.siswa import CreateSiswaRequest, HabitStatistic, UpdateSiswaRequest
from jurnal_digital.utils.repository import Repository

logger = logging.getLogger(__name__)

NIS_TAKEN = "NIS sudah terdaftar"


class SiswaManager:
    """Manages student records."""

    def __init__(self, db: Session):
        self.db = db
        self.siswa = Repository(
            db,
            SiswaModel,
            not_found_message="Siswa tidak ditemukan",
            conflict_message=NIS_TAKEN,
        )

    def create_siswa(self, req: CreateSiswaRequest, created_by: str) -> SiswaModel:
        """Create a student.

        Raises:
            AlreadyRegisteredError: If the NIS is already registered.
        """
        if self.siswa.find_one(SiswaModel.nis == req.nis):
            raise AlreadyRegisteredError(NIS_TAKEN)

        data = req.model_dump()
        siswa = SiswaModel(**data, status="active", created_by=created_by)
        self.siswa.create(siswa, conflict_error=AlreadyRegisteredError)
        logger.info("Created siswa %s (%s)", siswa.nis, siswa.id)
        return siswa

    def list_siswa(
        self,
        kelas: Optional[str] = None,
        jurusan: Optional[str] = None,
        status: Optional[str] = None,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[SiswaModel], int]:
        """List students, active ones unless another status is requested.

        ``search`` matches a case-insensitive substring of the name or NIS.
        """
        filters = [SiswaModel.status == (status or "active")]
        if kelas:
            filters.append(SiswaModel.kelas == kelas)
        if jurusan:
            filters.append(SiswaModel.jurusan == jurusan)
        if search:
            filters.append(
                or_(
                    SiswaModel.nama_lengkap.icontains(search, autoescape=True),
                    SiswaModel.nis.icontains(search, autoescape=True),
                )
            )
        return self.siswa.list(
            filters=filters,
            order_by=[SiswaModel.nama_lengkap.asc()],
            page=page,
            limit=limit,
        )

    def get_siswa(self, siswa_id: str) -> SiswaModel:
        return self.siswa.find_by_id(siswa_id)

    def update_siswa(self, siswa_id: str, req: UpdateSiswaRequest) -> None:
        patch = req.model_dump(exclude_unset=True, exclude_none=True)
        self.siswa.update_partial(siswa_id, patch)
        logger.info("Updated siswa %s: %s", siswa_id, sorted(patch))

    def habit_statistics(self, siswa_id: str) -> List[HabitStatistic]:
        """Per-habit entry count and average character rating for one student."""
        rows = self.db.execute(
            select(
                JurnalModel.kebiasaan,
                func.count(JurnalModel.id),
                func.avg(JurnalModel.nilai_karakter),
            )
            .where(JurnalModel.siswa_id == siswa_id)
            .group_by(JurnalModel.kebiasaan)
            .order_by(JurnalModel.kebiasaan)
        ).all()
        return [
            HabitStatistic(kebiasaan=kebiasaan, total_entries=total, avg_nilai=float(avg))
            for kebiasaan, total, avg in rows
        ]
