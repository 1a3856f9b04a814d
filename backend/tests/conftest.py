"""
Point the app at a throwaway sqlite file before anything imports gymlog,
create the tables and the two logins the tests use, and reseed the sets
table before every test.
"""
import os
import tempfile
from datetime import datetime, timezone
from decimal import Decimal

_tmpdir = tempfile.mkdtemp(prefix="gymlog-tests-")
os.environ["DB_URL"] = f"sqlite:///{os.path.join(_tmpdir, 'gymlog.db')}"
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from sqlalchemy import delete

from gymlog.db import SessionLocal, init_db
from gymlog.models import ExerciseSet, User
from gymlog.repositories.user_repo import UserRepository
from gymlog.security import hash_password

PWD = "pass"
SEED_SET = {
    "id": "set id 1",
    "user_id": "user",
    "weight": Decimal("102.5"),
    "exercise": "Squat",
    "repetitions": 10,
}


@pytest.fixture(scope="session", autouse=True)
def _schema():
    init_db()
    with SessionLocal() as db:
        db.execute(delete(User))
        db.commit()
        repo = UserRepository(db)
        for name in ("user", "notfound", "other"):
            repo.create(username=name, password_hash=hash_password(PWD))
        repo.create(username="disabled", password_hash=hash_password(PWD), enabled=False)
    yield


@pytest.fixture(autouse=True)
def seeded_sets(_schema):
    with SessionLocal() as db:
        db.execute(delete(ExerciseSet))
        db.add(ExerciseSet(created_date=datetime.now(timezone.utc), **SEED_SET))
        db.commit()
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    yield session
    session.close()


def count_sets(user_id=None):
    with SessionLocal() as s:
        q = s.query(ExerciseSet)
        if user_id is not None:
            q = q.filter(ExerciseSet.user_id == user_id)
        return q.count()
