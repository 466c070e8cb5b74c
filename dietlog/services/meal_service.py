"""
Сервис приемов пищи: создание, выборка, пагинация, метрики диеты и обновление
с проверкой владельца.
"""
import asyncio
import logging
import uuid
from contextlib import aclosing
from typing import Any, Dict, Optional, Protocol
from uuid import UUID

from dietlog.core.exceptions import NotFoundError, UnauthorizedError
from dietlog.models.meal import Meal
from dietlog.repositories.meal_repository import MealRepository
from dietlog.schemas.meal import MealCreate, MealUpdate
from dietlog.services.streak_calculator import best_streak_async

logger = logging.getLogger(__name__)


class UserLookup(Protocol):
    async def exists(self, user_id: UUID) -> bool: ...


def merge_meal_patch(meal: Meal, patch: MealUpdate) -> Dict[str, Any]:
    """
    Слияние патча с текущей записью.

    None означает "поле не передано" и сохраняет старое значение.
    Для is_on_diet перезаписывает только явный False, True игнорируется.
    """
    return {
        "name": patch.name if patch.name is not None else meal.name,
        "description": patch.description if patch.description is not None else meal.description,
        "is_on_diet": False if patch.is_on_diet is False else meal.is_on_diet,
        "created_at": patch.created_at if patch.created_at is not None else meal.created_at,
    }


class MealService:
    def __init__(self, meals: MealRepository, users: UserLookup):
        self.meals = meals
        self.users = users

    async def create(self, data: MealCreate) -> Meal:
        if not await self.users.exists(data.user_id):
            logger.warning(f"Попытка создать прием пищи для несуществующего пользователя {data.user_id}")
            raise NotFoundError("User not registered")

        meal = Meal(
            id=uuid.uuid4(),
            name=data.name,
            description=data.description,
            is_on_diet=data.is_on_diet,
            created_at=data.created_at,
            user_id=data.user_id,
        )
        await self.meals.insert(meal)
        logger.info(f"Прием пищи {meal.id} создан для пользователя {meal.user_id}")
        return meal

    async def find_unique(self, meal_id: UUID) -> Meal:
        meal = await self.meals.get(meal_id)
        if meal is None:
            raise NotFoundError("Meal not registered")
        return meal

    async def find_many(self, user_id: UUID, page: int, take: int) -> Dict[str, Any]:
        count_task = asyncio.create_task(self.meals.count_by_user(user_id))
        list_task = asyncio.create_task(
            self.meals.list_by_user(user_id, offset=page * take, limit=take)
        )
        try:
            total, meals = await asyncio.gather(count_task, list_task)
        except BaseException:
            # Ошибка одного чтения отменяет второе, чтобы не держать его сессию
            count_task.cancel()
            list_task.cancel()
            raise

        # Пустая страница считается ошибкой, а не пустым результатом
        if not meals:
            raise NotFoundError("No meals registered")

        return {"meals": meals, "page": page, "take": take, "total": total}

    async def count_total(self, user_id: UUID) -> Dict[str, int]:
        total = await self.meals.count_by_user(user_id)
        return {"total": total}

    async def count_by_diet(self, user_id: UUID, is_on_diet: bool = False) -> Dict[str, int]:
        total = await self.meals.count_by_user(user_id, is_on_diet=is_on_diet)
        return {"total": total}

    async def best_streak(self, user_id: UUID) -> Dict[str, int]:
        async with aclosing(self.meals.stream_by_user(user_id)) as flags:
            best_sequence = await best_streak_async(flags)

        logger.debug(f"Лучшая серия пользователя {user_id}: {best_sequence}")
        return {"best_sequence": best_sequence}

    async def update(
        self,
        meal_id: UUID,
        patch: MealUpdate,
        acting_user_id: Optional[UUID] = None,
    ) -> None:
        meal = await self.find_unique(meal_id)

        owner_id = acting_user_id if acting_user_id is not None else patch.user_id
        if owner_id is None or owner_id != meal.user_id:
            logger.warning(f"Пользователь {owner_id} пытался изменить чужой прием пищи {meal_id}")
            raise UnauthorizedError("You are not allowed to update this meal")

        updated = await self.meals.update(meal_id, owner_id, merge_meal_patch(meal, patch))
        if not updated:
            logger.debug(f"Прием пищи {meal_id} не изменен: запись не найдена при обновлении")

    async def delete(self, meal_id: UUID) -> None:
        # Проверяется только существование, владелец не проверяется
        await self.find_unique(meal_id)
        await self.meals.delete(meal_id)
        logger.info(f"Прием пищи {meal_id} удален")
