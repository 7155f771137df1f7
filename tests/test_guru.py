BU_SARI = {"nip": "198001012005012001", "nama_lengkap": "Sari Wulandari", "mata_pelajaran": "PAI"}


def test_create_and_get_guru(client, auth_headers):
    res = client.post("/api/guru", json=BU_SARI, headers=auth_headers)
    assert res.status_code == 201
    guru = res.json()["data"]
    assert guru["status"] == "active"

    res = client.get(f"/api/guru/{guru['id']}", headers=auth_headers)
    assert res.status_code == 200
    assert res.json()["data"]["guru"]["nip"] == BU_SARI["nip"]


def test_duplicate_nip(client, auth_headers):
    client.post("/api/guru", json=BU_SARI, headers=auth_headers)
    res = client.post("/api/guru", json={**BU_SARI, "nama_lengkap": "Orang Lain"}, headers=auth_headers)
    assert res.status_code == 400
    assert res.json()["message"] == "NIP sudah terdaftar"


def test_guru_validation(client, auth_headers):
    res = client.post("/api/guru", json={"nip": "123", "email": "x"}, headers=auth_headers)
    assert res.status_code == 400
    assert {e["field"] for e in res.json()["errors"]} == {"nip", "nama_lengkap", "email"}


def test_list_guru_filters_and_pagination(client, auth_headers):
    for i, mapel in enumerate(["PAI", "PAI", "Matematika"]):
        client.post(
            "/api/guru",
            json={"nip": f"1980000000000000{i:02d}", "nama_lengkap": f"Guru {mapel} {i}", "mata_pelajaran": mapel},
            headers=auth_headers,
        )

    data = client.get("/api/guru?mata_pelajaran=PAI&limit=1", headers=auth_headers).json()["data"]
    assert len(data["guru"]) == 1
    assert data["pagination"] == {"current_page": 1, "total_pages": 2, "total_guru": 2, "per_page": 1}

    data = client.get("/api/guru", params={"search": "matematika"}, headers=auth_headers).json()["data"]
    assert [g["mata_pelajaran"] for g in data["guru"]] == ["Matematika"]


def test_update_guru(client, auth_headers):
    guru = client.post("/api/guru", json=BU_SARI, headers=auth_headers).json()["data"]

    res = client.put(f"/api/guru/{guru['id']}", json={"status": "inactive"}, headers=auth_headers)
    assert res.status_code == 200
    assert client.get("/api/guru", headers=auth_headers).json()["data"]["guru"] == []

    res = client.put("/api/guru/65a1b2c3d4e5f60718293a4b", json={"no_hp": "0812"}, headers=auth_headers)
    assert res.status_code == 404


def test_list_guru_rejects_unknown_status(client, auth_headers):
    res = client.get("/api/guru", params={"status": "pensiun"}, headers=auth_headers)
    assert res.status_code == 400
    assert res.json()["errors"][0]["field"] == "status"


def test_update_guru_rejects_blank_name(client, auth_headers):
    guru = client.post("/api/guru", json=BU_SARI, headers=auth_headers).json()["data"]
    res = client.put(f"/api/guru/{guru['id']}", json={"nama_lengkap": "", "status": ""}, headers=auth_headers)
    assert res.status_code == 400
    assert {e["field"] for e in res.json()["errors"]} == {"nama_lengkap", "status"}
