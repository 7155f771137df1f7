from datetime import date

import pytest
from fastapi.testclient import TestClient

from jurnal_digital import config
from jurnal_digital.app import create_app
from jurnal_digital.core.exceptions import AlreadyRegisteredError, ConflictError, NotFoundError
from jurnal_digital.models.jurnal import JurnalModel
from jurnal_digital.models.siswa import SiswaModel
from jurnal_digital.schemas.siswa import CreateSiswaRequest
from jurnal_digital.utils.repository import Repository
from jurnal_digital.utils.siswa_manager import SiswaManager


def _entry(**overrides):
    values = dict(
        siswa_id="65a1b2c3d4e5f60718293a4b",
        nama_siswa="Ani",
        kelas="X-1",
        jurusan="RPL",
        tanggal=date(2024, 8, 12),
        kebiasaan="Religius",
        aktivitas="Sholat subuh berjamaah",
        refleksi="Saya merasa lebih tenang hari ini",
        nilai_karakter=4,
    )
    values.update(overrides)
    return JurnalModel(**values)


def test_store_unique_constraint_is_authoritative(db_session):
    repo = Repository(db_session, JurnalModel, conflict_message="duplikat")
    first_id = repo.create(_entry())
    assert len(first_id) == 24

    with pytest.raises(ConflictError, match="duplikat"):
        repo.create(_entry(aktivitas="Entri kedua yang lolos pengecekan awal"))

    # the session is still usable after the rollback
    items, total = repo.list()
    assert total == 1 and items[0].id == first_id


def test_racing_nis_registration_maps_to_friendly_error(db_session, monkeypatch):
    manager = SiswaManager(db_session)
    req = CreateSiswaRequest(nis="12345678", nama_lengkap="Ani", kelas="X-1", jurusan="RPL")
    manager.create_siswa(req, created_by="65a1b2c3d4e5f60718293a4b")

    # simulate a concurrent request whose pre-check ran before the first insert
    monkeypatch.setattr(manager.siswa, "find_one", lambda *criteria: None)
    with pytest.raises(AlreadyRegisteredError, match="NIS sudah terdaftar"):
        manager.create_siswa(req, created_by="65a1b2c3d4e5f60718293a4b")


def test_find_by_id_and_update_partial(db_session):
    repo = Repository(db_session, JurnalModel, not_found_message="tidak ada")
    entry_id = repo.create(_entry())
    before = repo.find_by_id(entry_id).updated_at

    repo.update_partial(entry_id, {"nilai_karakter": 2})
    updated = repo.find_by_id(entry_id)
    assert updated.nilai_karakter == 2
    assert updated.aktivitas == "Sholat subuh berjamaah"
    assert updated.updated_at >= before

    with pytest.raises(NotFoundError, match="tidak ada"):
        repo.find_by_id("65a1b2c3d4e5f60718293a4c")
    with pytest.raises(NotFoundError):
        repo.update_partial("65a1b2c3d4e5f60718293a4c", {"nilai_karakter": 1})


def test_list_skip_and_total(db_session):
    repo = Repository(db_session, SiswaModel)
    for i in range(12):
        repo.create(SiswaModel(nis=f"{10000000 + i}", nama_lengkap=f"Siswa {i:02d}", kelas="X-1", jurusan="RPL"))

    order = [SiswaModel.nama_lengkap.asc()]
    page_two, total = repo.list(order_by=order, page=2, limit=5)
    assert total == 12
    assert [s.nama_lengkap for s in page_two] == [f"Siswa {i:02d}" for i in range(5, 10)]

    past_end, total = repo.list(order_by=order, page=4, limit=5)
    assert past_end == [] and total == 12

    filtered, total = repo.list(filters=[SiswaModel.kelas == "X-9"])
    assert filtered == [] and total == 0


def test_unexpected_errors_return_safe_500(database, monkeypatch):
    def boom(self, *args, **kwargs):
        raise RuntimeError("database password leaked here")

    monkeypatch.setattr(SiswaManager, "list_siswa", boom)
    app = create_app(database=database)
    with TestClient(app, raise_server_exceptions=False) as client:
        token = client.post(
            "/api/auth/register",
            json={"username": "admin1", "email": "admin1@smkn4.sch.id", "password": "rahasia123", "role": "admin"},
        ).json()["data"]["token"]
        headers = {"Authorization": f"Bearer {token}"}

        res = client.get("/api/siswa", headers=headers)
        assert res.status_code == 500
        assert res.json() == {"success": False, "message": "Terjadi kesalahan server"}

        monkeypatch.setattr(config, "DEBUG", True)
        res = client.get("/api/siswa", headers=headers)
        assert res.status_code == 500
        assert res.json()["error"] == "database password leaked here"
