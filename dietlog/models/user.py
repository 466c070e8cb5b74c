import uuid
from datetime import datetime

from sqlalchemy import Column, String, DateTime, Uuid
from sqlalchemy.orm import relationship

from dietlog.core.base import Base


class User(Base):
    __tablename__ = "user"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(String, unique=True, nullable=False, index=True)
    password = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    meals = relationship("Meal", back_populates="user", cascade="all, delete")
