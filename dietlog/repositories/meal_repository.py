"""
Хранилище приемов пищи поверх таблицы meal.

Каждая операция открывает собственную сессию из фабрики, поэтому независимые
чтения (например, count и list в пагинации) можно выполнять конкурентно.
"""
from typing import Any, AsyncIterator, Dict, List, Optional
from uuid import UUID

from sqlalchemy import select, func, update as sa_update, delete as sa_delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from dietlog.core.exceptions import ConflictError
from dietlog.models.meal import Meal


class MealRepository:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def insert(self, meal: Meal) -> Meal:
        async with self.session_factory() as session:
            session.add(meal)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise ConflictError(f"Meal {meal.id} already exists") from e
        return meal

    async def get(self, meal_id: UUID) -> Optional[Meal]:
        async with self.session_factory() as session:
            return await session.get(Meal, meal_id)

    async def list_by_user(self, user_id: UUID, offset: int, limit: int) -> List[Meal]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(Meal)
                .where(Meal.user_id == user_id)
                .offset(offset)
                .limit(limit)
            )
            return list(result.scalars().all())

    async def count_by_user(self, user_id: UUID, is_on_diet: Optional[bool] = None) -> int:
        query = select(func.count(Meal.id)).where(Meal.user_id == user_id)
        if is_on_diet is not None:
            query = query.where(Meal.is_on_diet == is_on_diet)

        async with self.session_factory() as session:
            result = await session.execute(query)
            return int(result.scalar_one())

    async def update(self, meal_id: UUID, user_id: UUID, values: Dict[str, Any]) -> int:
        """Обновляет запись только если совпадают и id, и владелец. Возвращает число строк."""
        async with self.session_factory() as session:
            result = await session.execute(
                sa_update(Meal)
                .where(Meal.id == meal_id, Meal.user_id == user_id)
                .values(**values)
            )
            await session.commit()
            return result.rowcount

    async def delete(self, meal_id: UUID) -> int:
        async with self.session_factory() as session:
            result = await session.execute(sa_delete(Meal).where(Meal.id == meal_id))
            await session.commit()
            return result.rowcount

    async def stream_by_user(self, user_id: UUID) -> AsyncIterator[bool]:
        """
        Ленивый проход по флагам is_on_diet пользователя в хронологическом порядке.

        Порядок: created_at по возрастанию, при равенстве - id.
        Курсор и сессия освобождаются при завершении, ошибке или закрытии генератора.
        """
        query = (
            select(Meal.is_on_diet)
            .where(Meal.user_id == user_id)
            .order_by(Meal.created_at.asc(), Meal.id.asc())
        )
        async with self.session_factory() as session:
            result = await session.stream(query)
            try:
                async for is_on_diet in result.scalars():
                    yield is_on_diet
            finally:
                await result.close()
