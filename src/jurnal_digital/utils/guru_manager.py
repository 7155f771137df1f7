"""Teacher (guru) management utilities."""

import logging
from typing import List, Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.orm import Session

from jurnal_digital.core.exceptions import AlreadyRegisteredError
from jurnal_digital.models.guru import GuruModel
from jurnal_digital.schemas.guru import CreateGuruRequest, UpdateGuruRequest
from jurnal_digital.utils.repository import Repository

logger = logging.getLogger(__name__)

NIP_TAKEN = "NIP sudah terdaftar"


class GuruManager:
    """Manages teacher records."""

    def __init__(self, db: Session):
        self.db = db
        self.guru = Repository(
            db,
            GuruModel,
            not_found_message="Guru tidak ditemukan",
            conflict_message=NIP_TAKEN,
        )

    def create_guru(self, req: CreateGuruRequest, created_by: str) -> GuruModel:
        if self.guru.find_one(GuruModel.nip == req.nip):
            raise AlreadyRegisteredError(NIP_TAKEN)

        guru = GuruModel(**req.model_dump(), status="active", created_by=created_by)
        self.guru.create(guru, conflict_error=AlreadyRegisteredError)
        logger.info("Created guru %s (%s)", guru.nip, guru.id)
        return guru

    def list_guru(
        self,
        mata_pelajaran: Optional[str] = None,
        status: Optional[str] = None,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[GuruModel], int]:
        filters = [GuruModel.status == (status or "active")]
        if mata_pelajaran:
            filters.append(GuruModel.mata_pelajaran == mata_pelajaran)
        if search:
            filters.append(
                or_(
                    GuruModel.nama_lengkap.icontains(search, autoescape=True),
                    GuruModel.nip.icontains(search, autoescape=True),
                )
            )
        return self.guru.list(
            filters=filters,
            order_by=[GuruModel.nama_lengkap.asc()],
            page=page,
            limit=limit,
        )

    def get_guru(self, guru_id: str) -> GuruModel:
        return self.guru.find_by_id(guru_id)

    def update_guru(self, guru_id: str, req: UpdateGuruRequest) -> None:
        patch = req.model_dump(exclude_unset=True, exclude_none=True)
        self.guru.update_partial(guru_id, patch)
        logger.info("Updated guru %s: %s", guru_id, sorted(patch))
