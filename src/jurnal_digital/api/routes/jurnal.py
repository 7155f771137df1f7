"""Daily journal routes."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, status

from jurnal_digital import config
from jurnal_digital.core.dependencies import CurrentUserDep, JurnalManagerDep
from jurnal_digital.core.validation import drop_blank, validate_payload, validated_body
from jurnal_digital.schemas.common import envelope, pagination_block
from jurnal_digital.schemas.jurnal import (
    KEBIASAAN_LIST,
    CreateJurnalRequest,
    Jurnal,
    JurnalQuery,
    UpdateJurnalRequest,
)

router = APIRouter(prefix="/api/jurnal", tags=["Jurnal"])


def _dump(model) -> dict:
    return Jurnal.model_validate(model).model_dump(mode="json")


def jurnal_query(
    siswa_id: Optional[str] = None,
    tanggal_mulai: Optional[str] = None,
    tanggal_selesai: Optional[str] = None,
    kebiasaan: Optional[str] = None,
    kelas: Optional[str] = None,
    jurusan: Optional[str] = None,
) -> JurnalQuery:
    """Collect and validate the listing filters from the query string."""
    raw = {
        "siswa_id": siswa_id,
        "tanggal_mulai": tanggal_mulai,
        "tanggal_selesai": tanggal_selesai,
        "kebiasaan": kebiasaan,
        "kelas": kelas,
        "jurusan": jurusan,
    }
    return validate_payload(JurnalQuery, drop_blank(raw))


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create a journal entry")
def create_jurnal(
    current_user: CurrentUserDep,
    req: Annotated[CreateJurnalRequest, Depends(validated_body(CreateJurnalRequest))],
    jurnal_manager: JurnalManagerDep,
) -> dict:
    """Create a journal entry.

    Args:
        req: Validated entry payload.
        jurnal_manager: Injected JurnalManager instance.
        current_user: Caller identity, recorded as creator.

    Returns:
        Envelope with the stored entry.
    """
    entry = jurnal_manager.create_entry(req, created_by=current_user.user_id)
    return envelope(_dump(entry), message="Jurnal berhasil disimpan")


@router.get("", summary="List journal entries")
def list_jurnal(
    current_user: CurrentUserDep,
    jurnal_manager: JurnalManagerDep,
    query: Annotated[JurnalQuery, Depends(jurnal_query)],
    page: int = Query(1, ge=1),
    limit: int = Query(config.DEFAULT_PAGE_SIZE, ge=1, le=config.MAX_PAGE_SIZE),
) -> dict:
    items, total = jurnal_manager.list_entries(query, page=page, limit=limit)
    return envelope(
        {
            "entries": [_dump(m) for m in items],
            "pagination": pagination_block(page, limit, total, "total_entries"),
        }
    )


# declared before /{entry_id} so the path is not taken for an id
@router.get("/kebiasaan", summary="List the seven habits")
def list_kebiasaan() -> dict:
    return envelope({"kebiasaan": KEBIASAAN_LIST, "total": len(KEBIASAAN_LIST)})


@router.get("/{entry_id}", summary="Get a journal entry")
def get_jurnal(current_user: CurrentUserDep, entry_id: str, jurnal_manager: JurnalManagerDep) -> dict:
    return envelope(_dump(jurnal_manager.get_entry(entry_id)))


@router.put("/{entry_id}", summary="Update a journal entry")
def update_jurnal(
    current_user: CurrentUserDep,
    entry_id: str,
    req: Annotated[UpdateJurnalRequest, Depends(validated_body(UpdateJurnalRequest))],
    jurnal_manager: JurnalManagerDep,
) -> dict:
    jurnal_manager.update_entry(entry_id, req)
    return envelope(message="Jurnal berhasil diperbarui")
