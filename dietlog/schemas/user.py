from uuid import UUID

from pydantic import BaseModel, EmailStr, Field


class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(min_length=8, max_length=16)


class UserRead(BaseModel):
    id: UUID
    email: EmailStr

    class Config:
        from_attributes = True
