"""
Общие фикстуры для всех тестов dietlog.

Стратегия:
- Тестовое FastAPI-приложение создаётся без lifespan (нет подключения к БД).
- MealService собирается поверх InMemoryMealStore и FakeUserLookup из tests/fakes.py
  и подставляется через dependency_overrides[get_meal_service].
- UserRepository заменяется на AsyncMock (mock_user_repo) для эндпоинтов пользователей.
"""

import uuid
import pytest
from unittest.mock import AsyncMock
from httpx import AsyncClient, ASGITransport
from fastapi import FastAPI
from datetime import datetime
from typing import AsyncGenerator

from dietlog.api.errors import register_exception_handlers
from dietlog.api.router import api_router
from dietlog.core.dependencies import get_meal_service, get_user_repository
from dietlog.models.meal import Meal
from dietlog.repositories.user_repository import UserRepository
from dietlog.services.meal_service import MealService
from tests.fakes import InMemoryMealStore, FakeUserLookup


# ---------------------------------------------------------------------------
# Вспомогательные функции
# ---------------------------------------------------------------------------

def create_test_app() -> FastAPI:
    """Тестовое FastAPI-приложение без lifespan."""
    test_app = FastAPI(title="dietlog Test App")
    register_exception_handlers(test_app)
    test_app.include_router(api_router, prefix="/api/v1")
    return test_app


def make_meal(
        user_id: uuid.UUID,
        created_at: datetime,
        is_on_diet: bool = True,
        name: str = "Салат",
        description: str = "Овощной салат",
) -> Meal:
    return Meal(
        id=uuid.uuid4(),
        name=name,
        description=description,
        is_on_diet=is_on_diet,
        created_at=created_at,
        user_id=user_id,
    )


# ---------------------------------------------------------------------------
# Фикстуры домена
# ---------------------------------------------------------------------------

@pytest.fixture
def owner_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def stranger_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def meal_store() -> InMemoryMealStore:
    return InMemoryMealStore()


@pytest.fixture
def user_lookup(owner_id, stranger_id) -> FakeUserLookup:
    return FakeUserLookup([owner_id, stranger_id])


@pytest.fixture
def meal_service(meal_store, user_lookup) -> MealService:
    return MealService(meal_store, user_lookup)


@pytest.fixture
def mock_user_repo() -> AsyncMock:
    """Мокированный UserRepository для эндпоинтов пользователей."""
    return AsyncMock(spec=UserRepository)


# ---------------------------------------------------------------------------
# HTTP-клиенты
# ---------------------------------------------------------------------------

@pytest.fixture
async def client(meal_service, mock_user_repo) -> AsyncGenerator[AsyncClient, None]:
    """
    Клиент с подменёнными зависимостями:
    get_meal_service → meal_service (in-memory), get_user_repository → mock_user_repo.
    """
    app = create_test_app()
    app.dependency_overrides[get_meal_service] = lambda: meal_service
    app.dependency_overrides[get_user_repository] = lambda: mock_user_repo
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
