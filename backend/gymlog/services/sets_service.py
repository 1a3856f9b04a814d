"""
Business rules for set rows.

The caller's identity is always passed in explicitly; the service never
takes an owner from the request payload.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from gymlog.errors import ValidationError
from gymlog.models import ExerciseSet
from gymlog.repositories.set_repo import SetRepository
from gymlog.schemas.exercise_set import SetCreate, SetList, SetRead

log = logging.getLogger(__name__)

REQUIRED_FIELDS = ("weight", "exercise", "repetitions")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_set_id() -> str:
    return uuid.uuid4().hex


class SetsService:
    def __init__(self, repo: SetRepository):
        self.repo = repo

    def list_sets(
        self,
        identity: str,
        *,
        user_id: Optional[str] = None,
        exercise: Optional[str] = None,
    ) -> SetList:
        rows = self.repo.list_for_owner(identity, user_filter=user_id, exercise=exercise)
        return SetList(total=len(rows), sets=[SetRead.model_validate(r) for r in rows])

    def create_set(self, identity: str, payload: SetCreate) -> ExerciseSet:
        missing = [name for name in REQUIRED_FIELDS if getattr(payload, name) is None]
        if missing:
            raise ValidationError(f"missing required field(s): {', '.join(missing)}")

        row = self.repo.create(
            identity,
            set_id=_new_set_id(),
            weight=payload.weight,
            exercise=payload.exercise,
            repetitions=payload.repetitions,
            created_date=_utc_now(),
        )
        log.info("set created id=%s user=%s exercise=%s", row.id, identity, row.exercise)
        return row

    def delete_set(self, identity: str, set_id: str) -> Optional[ExerciseSet]:
        """Return the deleted row, or None when the caller owns no set with that id."""
        row = self.repo.delete_for_owner(identity, set_id)
        if row is None:
            log.info("set delete no-op id=%s user=%s", set_id, identity)
        else:
            log.info("set deleted id=%s user=%s", set_id, identity)
        return row
