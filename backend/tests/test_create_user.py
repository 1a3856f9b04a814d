import pytest
from fastapi.testclient import TestClient
from gymlog.main import app
from gymlog.db import SessionLocal
from gymlog.repositories.user_repo import UserRepository
import create_user

client = TestClient(app)

def login(username, password):
    return client.post("/login", json={"username": username, "password": password})

def enabled(username):
    with SessionLocal() as db:
        return UserRepository(db).get(username).enabled

def test_create_then_login(capsys):
    create_user.main(["create", "cli-made", "s3cret"])
    assert "Created user cli-made" in capsys.readouterr().out
    assert login("cli-made", "s3cret").status_code == 200

def test_create_duplicate_exits_nonzero():
    create_user.main(["create", "cli-dupe", "pw"])
    with pytest.raises(SystemExit) as exc:
        create_user.main(["create", "cli-dupe", "pw"])
    assert exc.value.code == 1

def test_disable_and_enable_existing_user():
    create_user.main(["create", "cli-toggle", "pw"])
    tok = login("cli-toggle", "pw").headers["Authorization"]

    create_user.main(["disable", "cli-toggle"])
    assert enabled("cli-toggle") is False
    assert login("cli-toggle", "pw").status_code == 401
    assert client.get("/api/heartbeat", headers={"Authorization": tok}).status_code == 401

    create_user.main(["enable", "cli-toggle"])
    assert enabled("cli-toggle") is True
    assert client.get("/api/heartbeat", headers={"Authorization": tok}).status_code == 200

def test_toggle_unknown_user_exits_nonzero():
    with pytest.raises(SystemExit) as exc:
        create_user.main(["disable", "no-such-login"])
    assert exc.value.code == 1

def test_created_disabled_cannot_login():
    create_user.main(["create", "cli-off", "pw", "--disabled"])
    assert login("cli-off", "pw").status_code == 401
