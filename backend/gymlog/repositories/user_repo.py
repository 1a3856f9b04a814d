# gymlog/repositories/user_repo.py
from __future__ import annotations
from typing import Optional

from sqlalchemy.exc import IntegrityError

from gymlog.models import User
from gymlog.repositories.base import BaseRepository

class UserRepository(BaseRepository[User]):
    model = User

    # READS
    def get(self, username: str) -> Optional[User]:
        return self.db.get(User, username)

    # WRITES
    def create(self, *, username: str, password_hash: str, enabled: bool = True) -> User:
        user = User(username=username, password_hash=password_hash, enabled=enabled)
        try:
            return self.add_and_refresh(user)
        except IntegrityError:
            # Re-raise a clean marker callers can report on
            raise ValueError("username_already_exists")

    def set_enabled(self, username: str, *, enabled: bool) -> Optional[User]:
        user = self.get(username)
        if not user:
            return None
        user.enabled = enabled
        self.db.commit()
        self.db.refresh(user)
        return user
