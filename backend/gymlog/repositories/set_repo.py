from __future__ import annotations
from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from gymlog.models import ExerciseSet
from gymlog.repositories.base import BaseRepository

class SetRepository(BaseRepository[ExerciseSet]):
    """Every statement here carries the owner predicate; nothing is looked up by id alone."""
    model = ExerciseSet

    def list_for_owner(
        self,
        user_id: str,
        *,
        user_filter: Optional[str] = None,
        exercise: Optional[str] = None,
    ) -> list[ExerciseSet]:
        stmt = select(ExerciseSet).where(ExerciseSet.user_id == user_id)
        # Filters narrow the owner's rows, they never replace the owner predicate
        if user_filter is not None:
            stmt = stmt.where(ExerciseSet.user_id == user_filter)
        if exercise is not None:
            stmt = stmt.where(ExerciseSet.exercise == exercise)
        stmt = stmt.order_by(ExerciseSet.created_date.asc(), ExerciseSet.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def create(
        self,
        user_id: str,
        *,
        set_id: str,
        weight: Decimal,
        exercise: str,
        repetitions: int,
        created_date: datetime,
    ) -> ExerciseSet:
        s = ExerciseSet(
            id=set_id,
            user_id=user_id,
            weight=weight,
            exercise=exercise,
            repetitions=repetitions,
            created_date=created_date,
        )
        return self.add_and_refresh(s)

    def delete_for_owner(self, user_id: str, set_id: str) -> Optional[ExerciseSet]:
        """Single DELETE ... RETURNING; the returned entity is detached from the session."""
        table = ExerciseSet.__table__
        stmt = (
            delete(table)
            .where(table.c.user_id == user_id, table.c.id == set_id)
            .returning(*table.c)
        )
        try:
            row = self.db.execute(stmt).mappings().first()
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        if row is None:
            return None
        return ExerciseSet(**row)
