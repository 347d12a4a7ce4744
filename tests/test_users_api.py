from sqlalchemy.exc import OperationalError

from models.audit_log import AuditLog
from repositories.user_repository import UserRepository


def _register(client, username="alice", email="a@x.com", password="secret1", confirm=None, **extra):
    body = {
        "username": username,
        "email": email,
        "password": password,
        "confirm": confirm if confirm is not None else password,
    }
    body.update(extra)
    return client.post("/api/user/register", json=body)


def test_register_scenario(client):
    resp = _register(client, "alice", "a@x.com")
    assert resp.status_code == 200
    data = resp.json()
    assert data["username"] == "alice"
    assert data["role"] == "REPORTER"
    assert isinstance(data["user_id"], int)

    resp = _register(client, "alice", "b@x.com")
    assert resp.status_code == 400
    assert "username" in resp.json()["detail"]

    resp = _register(client, "bob", "a@x.com")
    assert resp.status_code == 400
    assert "email" in resp.json()["detail"]

    users = client.get("/api/user").json()["users"]
    assert [u["username"] for u in users] == ["alice"]


def test_register_password_mismatch(client):
    resp = _register(client, confirm="secret2")
    assert resp.status_code == 400
    assert client.get("/api/user").json()["users"] == []


def test_register_with_salvor_role(client):
    resp = _register(client, role="SALVOR")
    assert resp.json()["role"] == "SALVOR"


def test_register_rejects_unknown_role_and_short_password(client):
    assert _register(client, role="ADMIN").status_code == 422
    assert _register(client, password="abc").status_code == 422


def test_list_users_hides_password_hash(client):
    _register(client)
    user = client.get("/api/user").json()["users"][0]
    assert "password_hash" not in user
    assert user["email"] == "a@x.com"


def test_login(client):
    user_id = _register(client).json()["user_id"]

    resp = client.post("/api/user/login", json={"username": "alice", "password": "secret1"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    assert data["user_id"] == user_id
    assert data["email"] == "a@x.com"
    assert data["created_at"] is not None


def test_login_failures_look_the_same(client):
    _register(client)

    wrong_pw = client.post("/api/user/login", json={"username": "alice", "password": "nope"})
    unknown = client.post("/api/user/login", json={"username": "carol", "password": "secret1"})

    assert wrong_pw.status_code == unknown.status_code == 401
    assert wrong_pw.json() == unknown.json()
    assert wrong_pw.json()["success"] is False


def test_login_store_fault_is_500(client, monkeypatch):
    def _boom(self, username):
        raise OperationalError("SELECT", {}, Exception("database is gone"))

    monkeypatch.setattr(UserRepository, "find_by_username", _boom)

    resp = client.post("/api/user/login", json={"username": "alice", "password": "secret1"})
    assert resp.status_code == 500
    assert resp.json()["success"] is False


def test_update_profile(client):
    user_id = _register(client).json()["user_id"]

    resp = client.put(f"/api/user/{user_id}", json={"email": "New@x.com", "phone_number": "555"})
    assert resp.status_code == 200
    assert resp.json()["email"] == "new@x.com"
    assert resp.json()["phone_number"] == "555"

    # email omitted, phone explicitly cleared
    resp = client.put(f"/api/user/{user_id}", json={"phone_number": None})
    assert resp.json()["email"] == "new@x.com"
    assert resp.json()["phone_number"] is None


def test_update_profile_omitted_phone_is_kept(client):
    user_id = _register(client).json()["user_id"]
    client.put(f"/api/user/{user_id}", json={"phone_number": "555"})

    resp = client.put(f"/api/user/{user_id}", json={"email": "other@x.com"})
    assert resp.json()["phone_number"] == "555"


def test_update_profile_errors(client):
    alice = _register(client).json()["user_id"]
    _register(client, "bob", "b@x.com")

    assert client.put("/api/user/999", json={"email": "z@x.com"}).status_code == 404
    assert client.put(f"/api/user/{alice}", json={"email": "b@x.com"}).status_code == 409


def test_user_actions_are_audited(client, db_session):
    user_id = _register(client).json()["user_id"]
    client.post("/api/user/login", json={"username": "alice", "password": "secret1"})
    client.put(f"/api/user/{user_id}", json={"phone_number": "555"}, headers={"X-User-Id": str(user_id)})

    rows = db_session.query(AuditLog).order_by(AuditLog.id).all()
    assert [r.action for r in rows] == ["register", "login", "update_profile"]
    assert all(r.target_user_id == user_id for r in rows)
    assert rows[2].actor_id == user_id
    assert rows[2].detail == "fields=phone_number"
    assert all("secret1" not in (r.detail or "") for r in rows)


def test_register_rejects_malformed_email(client):
    assert _register(client, email="not-an-email").status_code == 422
    assert client.get("/api/user").json()["users"] == []


def test_update_profile_rejects_malformed_or_overlong_email(client):
    user_id = _register(client).json()["user_id"]

    assert client.put(f"/api/user/{user_id}", json={"email": "not-an-email"}).status_code == 422
    assert client.put(f"/api/user/{user_id}", json={"email": "x" * 300}).status_code == 422
    too_long = "a" * 60 + "@" + ".".join(["b" * 60] * 4) + ".com"
    assert client.put(f"/api/user/{user_id}", json={"email": too_long}).status_code == 422

    assert client.get("/api/user").json()["users"][0]["email"] == "a@x.com"
