from fastapi import APIRouter, Depends, status

from dietlog.core.dependencies import get_user_service
from dietlog.schemas.user import UserCreate, UserRead
from dietlog.services.user_service import UserService

router = APIRouter()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(
        user_data: UserCreate,
        service: UserService = Depends(get_user_service),
):
    """Регистрация пользователя"""
    return await service.create(user_data)
