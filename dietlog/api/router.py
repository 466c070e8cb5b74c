from fastapi import APIRouter
from dietlog.api.v1.users import router as users_router
from dietlog.api.v1.meals import router as meals_router

api_router = APIRouter()

api_router.include_router(users_router, prefix="/users", tags=["users"])
api_router.include_router(meals_router, prefix="/meals", tags=["meals"])
