import os

# must be set before jurnal_digital.config is imported
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from jurnal_digital.app import create_app
from jurnal_digital.core.database import Database


@pytest.fixture
def database():
    db = Database("sqlite://")
    db.init_db()
    yield db
    db.dispose()


@pytest.fixture
def db_session(database):
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def client(database):
    app = create_app(database=database)
    with TestClient(app) as test_client:
        yield test_client


def register(client, username="guru_ani", email=None, password="rahasia123", role="teacher"):
    res = client.post(
        "/api/auth/register",
        json={
            "username": username,
            "email": email or f"{username}@smkn4.sch.id",
            "password": password,
            "role": role,
        },
    )
    assert res.status_code == 201, res.text
    return res.json()["data"]


@pytest.fixture
def auth_headers(client):
    data = register(client)
    return {"Authorization": f"Bearer {data['token']}"}


@pytest.fixture
def make_siswa(client, auth_headers):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        payload = {
            "nis": f"{20240000 + counter['n']}",
            "nama_lengkap": f"Siswa {counter['n']:02d}",
            "kelas": "X-1",
            "jurusan": "RPL",
        }
        payload.update(overrides)
        res = client.post("/api/siswa", json=payload, headers=auth_headers)
        assert res.status_code == 201, res.text
        return res.json()["data"]

    return _make


@pytest.fixture
def jurnal_payload():
    def _payload(siswa_id, **overrides):
        payload = {
            "siswa_id": siswa_id,
            "tanggal": "2024-08-12",
            "kebiasaan": "Religius",
            "aktivitas": "Sholat subuh berjamaah di masjid",
            "refleksi": "Saya merasa lebih tenang memulai hari ini",
            "nilai_karakter": 4,
        }
        payload.update(overrides)
        return payload

    return _payload
