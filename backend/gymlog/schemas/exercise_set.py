from typing import Annotated
from datetime import datetime, timezone
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Keep max length via Field
ExerciseStr = Annotated[str, Field(max_length=120)]
RepCount = Annotated[int, Field(ge=0)]
Weight = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]

# Wire format is camelCase (userId, createdDate); snake_case is accepted on input too
camel_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class SetCreate(BaseModel):
    # id, userId and createdDate are assigned server-side; if a client sends them they are dropped.
    # The three below may arrive as null: SetsService reports which ones are missing.
    weight: Weight | None = None
    exercise: ExerciseStr | None = None
    repetitions: RepCount | None = None

    model_config = camel_config

    @field_validator("exercise")
    @classmethod
    def exercise_non_blank(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v2 = v.strip()
        if not v2:
            raise ValueError("exercise cannot be blank")
        return v2  # return the trimmed value so the DB gets clean text

class SetRead(BaseModel):
    id: str
    user_id: str
    weight: float
    exercise: str
    repetitions: int
    created_date: datetime

    model_config = ConfigDict(from_attributes=True, **camel_config)

    @field_validator("created_date")
    @classmethod
    def created_date_utc(cls, v: datetime) -> datetime:
        # sqlite hands DateTime(timezone=True) back naive; rows are always stamped in UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

class SetList(BaseModel):
    total: int
    sets: list[SetRead]
