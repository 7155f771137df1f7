"""Teacher management routes."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, status

from jurnal_digital import config
from jurnal_digital.core.dependencies import CurrentUserDep, GuruManagerDep
from jurnal_digital.core.validation import drop_blank, ensure_valid, validated_body
from jurnal_digital.schemas.common import envelope, pagination_block
from jurnal_digital.schemas.guru import CreateGuruRequest, Guru, UpdateGuruRequest
from jurnal_digital.schemas.siswa import STATUS_FILTER_RULES

router = APIRouter(prefix="/api/guru", tags=["Guru"])


def _dump(model) -> dict:
    return Guru.model_validate(model).model_dump(mode="json")


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create a teacher")
def create_guru(
    current_user: CurrentUserDep,
    req: Annotated[CreateGuruRequest, Depends(validated_body(CreateGuruRequest))],
    guru_manager: GuruManagerDep,
) -> dict:
    guru = guru_manager.create_guru(req, created_by=current_user.user_id)
    return envelope(_dump(guru), message="Guru berhasil ditambahkan")


@router.get("", summary="List teachers")
def list_guru(
    current_user: CurrentUserDep,
    guru_manager: GuruManagerDep,
    mata_pelajaran: Optional[str] = None,
    status: Optional[str] = None,
    search: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(config.DEFAULT_PAGE_SIZE, ge=1, le=config.MAX_PAGE_SIZE),
) -> dict:
    filters = drop_blank({"mata_pelajaran": mata_pelajaran, "status": status, "search": search})
    ensure_valid(filters, STATUS_FILTER_RULES)
    items, total = guru_manager.list_guru(**filters, page=page, limit=limit)
    return envelope(
        {
            "guru": [_dump(m) for m in items],
            "pagination": pagination_block(page, limit, total, "total_guru"),
        }
    )


@router.get("/{guru_id}", summary="Get a teacher")
def get_guru(current_user: CurrentUserDep, guru_id: str, guru_manager: GuruManagerDep) -> dict:
    return envelope({"guru": _dump(guru_manager.get_guru(guru_id))})


@router.put("/{guru_id}", summary="Update a teacher")
def update_guru(
    current_user: CurrentUserDep,
    guru_id: str,
    req: Annotated[UpdateGuruRequest, Depends(validated_body(UpdateGuruRequest))],
    guru_manager: GuruManagerDep,
) -> dict:
    guru_manager.update_guru(guru_id, req)
    return envelope(message="Data guru berhasil diperbarui")
