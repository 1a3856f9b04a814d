from datetime import datetime
from decimal import Decimal
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, String, Numeric, DateTime
from gymlog.db import Base

class ExerciseSet(Base):
    __tablename__ = "sets"
    # Owner first: every lookup and delete is scoped by user_id
    user_id: Mapped[str] = mapped_column(String(120), primary_key=True, index=True)
    id: Mapped[str] = mapped_column(String(64), primary_key=True, unique=True)
    weight: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    exercise: Mapped[str] = mapped_column(String(120), nullable=False)
    repetitions: Mapped[int] = mapped_column(Integer, nullable=False)
    created_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
