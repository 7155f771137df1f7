"""Student management routes."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, status

from jurnal_digital import config
from jurnal_digital.core.dependencies import CurrentUserDep, SiswaManagerDep
from jurnal_digital.core.validation import drop_blank, ensure_valid, validated_body
from jurnal_digital.schemas.common import envelope, pagination_block
from jurnal_digital.schemas.siswa import (
    STATUS_FILTER_RULES,
    CreateSiswaRequest,
    Siswa,
    UpdateSiswaRequest,
)

router = APIRouter(prefix="/api/siswa", tags=["Siswa"])


def _dump(model) -> dict:
    return Siswa.model_validate(model).model_dump(mode="json")


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create a student")
def create_siswa(
    current_user: CurrentUserDep,
    req: Annotated[CreateSiswaRequest, Depends(validated_body(CreateSiswaRequest))],
    siswa_manager: SiswaManagerDep,
) -> dict:
    siswa = siswa_manager.create_siswa(req, created_by=current_user.user_id)
    return envelope(_dump(siswa), message="Siswa berhasil ditambahkan")


@router.get("", summary="List students")
def list_siswa(
    current_user: CurrentUserDep,
    siswa_manager: SiswaManagerDep,
    kelas: Optional[str] = None,
    jurusan: Optional[str] = None,
    status: Optional[str] = None,
    search: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(config.DEFAULT_PAGE_SIZE, ge=1, le=config.MAX_PAGE_SIZE),
) -> dict:
    """List students with class/major/status filters and name or NIS search.

    Only active students are listed unless ``status`` says otherwise.
    """
    filters = drop_blank({"kelas": kelas, "jurusan": jurusan, "status": status, "search": search})
    ensure_valid(filters, STATUS_FILTER_RULES)
    items, total = siswa_manager.list_siswa(**filters, page=page, limit=limit)
    return envelope(
        {
            "siswa": [_dump(m) for m in items],
            "pagination": pagination_block(page, limit, total, "total_students"),
        }
    )


@router.get("/{siswa_id}", summary="Get a student with journal statistics")
def get_siswa(
    current_user: CurrentUserDep,
    siswa_id: str,
    siswa_manager: SiswaManagerDep,
) -> dict:
    siswa = siswa_manager.get_siswa(siswa_id)
    stats = siswa_manager.habit_statistics(siswa_id)
    return envelope(
        {
            "siswa": _dump(siswa),
            "jurnal_statistics": [s.model_dump() for s in stats],
        }
    )


@router.put("/{siswa_id}", summary="Update a student")
def update_siswa(
    current_user: CurrentUserDep,
    siswa_id: str,
    req: Annotated[UpdateSiswaRequest, Depends(validated_body(UpdateSiswaRequest))],
    siswa_manager: SiswaManagerDep,
) -> dict:
    siswa_manager.update_siswa(siswa_id, req)
    return envelope(message="Data siswa berhasil diperbarui")
