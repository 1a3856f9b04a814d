import pytest
from fastapi.testclient import TestClient
from gymlog.main import app
from gymlog.deps.auth import get_identity_resolver
from gymlog.errors import AuthenticationError
from gymlog.repositories.set_repo import SetRepository

client = TestClient(app)

class StaticResolver:
    """Accepts exactly one token and maps it to a fixed identity."""
    def __init__(self, token, identity):
        self.token, self.identity = token, identity

    def resolve_identity(self, token):
        if token != self.token:
            raise AuthenticationError("Not authenticated")
        return self.identity

@pytest.fixture
def static_resolver():
    app.dependency_overrides[get_identity_resolver] = lambda: StaticResolver("t0k", "user")
    yield
    app.dependency_overrides.pop(get_identity_resolver, None)

@pytest.fixture
def storage_tripwire(monkeypatch):
    calls = []
    def boom(self, *a, **kw):
        calls.append((a, kw))
        raise AssertionError("repository reached without an identity")
    for name in ("list_for_owner", "create", "delete_for_owner"):
        monkeypatch.setattr(SetRepository, name, boom)
    return calls

def test_unauthenticated_requests_never_reach_storage(storage_tripwire):
    bad = {"Authorization": "Bearer nope"}
    assert client.get("/api/sets", headers=bad).status_code == 401
    assert client.post("/api/sets", headers=bad, json={"weight": 1, "exercise": "X", "repetitions": 1}).status_code == 401
    assert client.delete("/api/sets/set id 1").status_code == 401
    # auth wins over a broken body too
    assert client.post("/api/sets", json={"weight": "x"}).status_code == 401
    assert storage_tripwire == []

def test_resolver_can_be_swapped(static_resolver):
    r = client.get("/api/sets", headers={"Authorization": "Bearer t0k"})
    assert r.status_code == 200
    assert r.json()["total"] == 1
    assert client.get("/api/sets", headers={"Authorization": "Bearer other"}).status_code == 401
