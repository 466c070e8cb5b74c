from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Index, Uuid
from sqlalchemy.orm import relationship

from dietlog.core.base import Base


class Meal(Base):
    __tablename__ = "meal"

    id = Column(Uuid, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    is_on_diet = Column(Boolean, nullable=False)
    # Логическое время приема пищи, задается клиентом
    created_at = Column(DateTime(timezone=True), nullable=False)
    user_id = Column(Uuid, ForeignKey("user.id"), nullable=False, index=True)

    user = relationship("User", back_populates="meals")

    __table_args__ = (
        Index("ix_meal_user_id_created_at", "user_id", "created_at"),
    )
