import logging

from dietlog.core.config import settings
from dietlog.core.base import Base
from dietlog.core.db import engine

# Импортируем ВСЕ модели, чтобы они попали в Base.metadata
from dietlog.models.user import User  # noqa: F401
from dietlog.models.meal import Meal  # noqa: F401

logger = logging.getLogger(__name__)


async def init_database():
    """Инициализация базы данных"""
    async with engine.begin() as conn:
        # Удаляем все таблицы если RESET_DATABASE=true
        if settings.RESET_DATABASE:
            logger.warning("RESET_DATABASE=true - пересоздаем БД")
            await conn.run_sync(Base.metadata.drop_all)

        await conn.run_sync(Base.metadata.create_all)
        logger.info("Таблицы БД созданы/проверены")
