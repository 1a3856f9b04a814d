from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from gymlog.main import app
from gymlog.repositories.set_repo import SetRepository
from conftest import count_sets, PWD

# storage failures are not handled locally; let them surface as a 500
client = TestClient(app, raise_server_exceptions=False)

def auth():
    r = client.post("/login", json={"username": "user", "password": PWD})
    return {"Authorization": r.headers["Authorization"]}

def db_down(*a, **kw):
    raise OperationalError("INSERT INTO sets", {}, Exception("connection refused"))

def test_create_storage_failure_is_500(monkeypatch):
    h = auth()
    monkeypatch.setattr(SetRepository, "create", db_down)
    r = client.post("/api/sets", headers=h, json={"weight": 70, "exercise": "Squat", "repetitions": 5})
    assert r.status_code == 500
    assert count_sets() == 1

def test_delete_storage_failure_is_500(monkeypatch):
    h = auth()
    monkeypatch.setattr(SetRepository, "delete_for_owner", db_down)
    r = client.delete("/api/sets/set id 1", headers=h)
    assert r.status_code == 500
    assert count_sets() == 1
