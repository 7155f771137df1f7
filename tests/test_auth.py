from conftest import register


def test_register_returns_user_and_token_without_password(client):
    res = client.post(
        "/api/auth/register",
        json={
            "username": "bu_sari",
            "email": "sari@smkn4.sch.id",
            "password": "rahasia123",
            "role": "teacher",
            "nama_lengkap": "Sari Wulandari",
        },
    )
    assert res.status_code == 201
    body = res.json()
    assert body["success"] is True
    user = body["data"]["user"]
    assert len(user["id"]) == 24
    assert user["nama_lengkap"] == "Sari Wulandari"
    assert user["role"] == "teacher"
    assert "password" not in user and "password_hash" not in user
    assert "rahasia123" not in res.text
    assert body["data"]["token"]


def test_register_defaults_display_name_to_username(client):
    data = register(client, username="pak_budi")
    assert data["user"]["nama_lengkap"] == "pak_budi"


def test_register_rejects_duplicate_username_or_email(client):
    register(client, username="pak_budi", email="budi@smkn4.sch.id")

    res = client.post(
        "/api/auth/register",
        json={"username": "pak_budi", "email": "lain@smkn4.sch.id", "password": "rahasia123", "role": "teacher"},
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Username atau email sudah terdaftar"

    res = client.post(
        "/api/auth/register",
        json={"username": "budi2", "email": "budi@smkn4.sch.id", "password": "rahasia123", "role": "teacher"},
    )
    assert res.status_code == 400


def test_register_validation_errors(client):
    res = client.post(
        "/api/auth/register",
        json={"username": "ab", "email": "bukan-email", "password": "123", "role": "kepala"},
    )
    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["message"] == "Validation error"
    assert {e["field"] for e in body["errors"]} == {"username", "email", "password", "role"}


def test_register_rejects_invalid_json(client):
    res = client.post(
        "/api/auth/register", content="{not json", headers={"Content-Type": "application/json"}
    )
    assert res.status_code == 400
    assert res.json()["errors"][0]["field"] == "body"


def test_login_with_username_or_email(client):
    register(client, username="pak_budi", email="budi@smkn4.sch.id")

    res = client.post("/api/auth/login", json={"username": "pak_budi", "password": "rahasia123"})
    assert res.status_code == 200
    assert res.json()["data"]["user"]["last_login"] is not None

    res = client.post("/api/auth/login", json={"username": "budi@smkn4.sch.id", "password": "rahasia123"})
    assert res.status_code == 200
    assert res.json()["data"]["token"]


def test_wrong_password_and_unknown_user_look_the_same(client):
    register(client, username="pak_budi")

    wrong_password = client.post("/api/auth/login", json={"username": "pak_budi", "password": "salah123"})
    unknown_user = client.post("/api/auth/login", json={"username": "tidak_ada", "password": "salah123"})

    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json()


def test_login_requires_fields(client):
    res = client.post("/api/auth/login", json={"username": ""})
    assert res.status_code == 400
    assert {e["field"] for e in res.json()["errors"]} == {"username", "password"}


def test_me_and_logout(client, auth_headers):
    res = client.get("/api/auth/me", headers=auth_headers)
    assert res.status_code == 200
    assert res.json()["data"]["user"]["username"] == "guru_ani"

    res = client.post("/api/auth/logout")
    assert res.status_code == 200
    assert res.json()["success"] is True


def test_protected_routes_require_a_valid_token(client):
    for method, path in [
        ("get", "/api/siswa"),
        ("post", "/api/siswa"),
        ("get", "/api/guru"),
        ("get", "/api/jurnal"),
        ("post", "/api/jurnal"),
        ("put", "/api/jurnal/65a1b2c3d4e5f60718293a4b"),
        ("get", "/api/auth/me"),
    ]:
        missing = getattr(client, method)(path)
        assert missing.status_code == 401, path

        bad = getattr(client, method)(path, headers={"Authorization": "Bearer not.a.token"})
        assert bad.status_code == 401, path
        assert bad.json()["success"] is False

        wrong_scheme = getattr(client, method)(path, headers={"Authorization": "Basic abc"})
        assert wrong_scheme.status_code == 401, path
