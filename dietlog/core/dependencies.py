from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from dietlog.core.db import AsyncSessionLocal, get_db
from dietlog.repositories.meal_repository import MealRepository
from dietlog.repositories.user_repository import UserRepository
from dietlog.services.meal_service import MealService
from dietlog.services.user_service import UserService


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    """Фабрика репозитория — инжектируется в эндпоинты через Depends."""
    return UserRepository(db)


def get_meal_repository() -> MealRepository:
    # Сессии открываются на каждую операцию, поэтому передаем фабрику, а не сессию
    return MealRepository(AsyncSessionLocal)


def get_user_service(users: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(users)


def get_meal_service(
        meals: MealRepository = Depends(get_meal_repository),
        users: UserRepository = Depends(get_user_repository),
) -> MealService:
    return MealService(meals, users)
