from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from dietlog.core.config import settings
from dietlog.core.dependencies import get_meal_service
from dietlog.schemas.meal import (
    MealCreate,
    MealCreated,
    MealUpdate,
    MealResponse,
    MealPage,
    MealTotal,
    MealBestSequence,
)
from dietlog.services.meal_service import MealService

router = APIRouter()


# ==========================
# МЕТРИКИ
# ==========================

@router.get("/metrics/total", response_model=MealTotal)
async def get_total_of_meals(
        user_id: UUID,
        service: MealService = Depends(get_meal_service),
):
    """Общее число приемов пищи пользователя"""
    return await service.count_total(user_id)


@router.get("/metrics/diet", response_model=MealTotal)
async def get_total_of_meals_regarding_diet(
        user_id: UUID,
        is_on_diet: bool = False,
        service: MealService = Depends(get_meal_service),
):
    """Число приемов пищи в рамках диеты (или вне ее)"""
    return await service.count_by_diet(user_id, is_on_diet)


@router.get("/metrics/best-sequence", response_model=MealBestSequence)
async def get_best_sequence_within_diet(
        user_id: UUID,
        service: MealService = Depends(get_meal_service),
):
    """Лучшая серия приемов пищи в рамках диеты"""
    return await service.best_streak(user_id)


# ==========================
# CRUD
# ==========================

@router.post("", response_model=MealCreated, status_code=status.HTTP_201_CREATED)
async def create_meal(
        meal_data: MealCreate,
        service: MealService = Depends(get_meal_service),
):
    meal = await service.create(meal_data)
    return {"id": meal.id}


@router.get("", response_model=MealPage)
async def list_meals(
        user_id: UUID,
        page: int = Query(0, ge=0),
        take: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
        service: MealService = Depends(get_meal_service),
):
    return await service.find_many(user_id, page, take)


@router.get("/{meal_id}", response_model=MealResponse)
async def get_meal(
        meal_id: UUID,
        service: MealService = Depends(get_meal_service),
):
    meal = await service.find_unique(meal_id)
    return {"meal": meal}


@router.put("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_meal(
        meal_id: UUID,
        patch: MealUpdate,
        service: MealService = Depends(get_meal_service),
):
    await service.update(meal_id, patch)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meal(
        meal_id: UUID,
        service: MealService = Depends(get_meal_service),
):
    await service.delete(meal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
