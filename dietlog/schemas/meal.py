from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime, timezone
from uuid import UUID


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Время без часового пояса считается UTC, с поясом - приводится к UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class MealCreate(BaseModel):
    name: str
    description: str
    created_at: datetime
    is_on_diet: bool
    user_id: UUID

    @field_validator("created_at")
    @classmethod
    def created_at_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class MealUpdate(BaseModel):
    """Частичное обновление: отсутствующие поля (None) сохраняют старое значение."""
    name: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    is_on_diet: Optional[bool] = None
    user_id: Optional[UUID] = None

    @field_validator("created_at")
    @classmethod
    def created_at_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class MealRead(BaseModel):
    id: UUID
    name: str
    description: str
    is_on_diet: bool
    created_at: datetime
    user_id: UUID

    class Config:
        from_attributes = True


class MealCreated(BaseModel):
    id: UUID


class MealResponse(BaseModel):
    meal: MealRead


class MealPage(BaseModel):
    meals: List[MealRead]
    page: int
    take: int
    total: int


class MealTotal(BaseModel):
    total: int


class MealBestSequence(BaseModel):
    best_sequence: int = Field(ge=0)
