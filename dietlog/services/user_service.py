import logging
from datetime import datetime
from uuid import UUID

import bcrypt

from dietlog.core.exceptions import ConflictError, NotFoundError
from dietlog.models.user import User
from dietlog.repositories.user_repository import UserRepository
from dietlog.schemas.user import UserCreate

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, users: UserRepository):
        self.users = users

    @staticmethod
    def hash_password(password: str) -> str:
        hashed = bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt())
        return hashed.decode('utf-8')

    async def create(self, data: UserCreate) -> User:
        if await self.users.get_by_email(data.email):
            logger.warning(f"Повторная регистрация email: {data.email}")
            raise ConflictError("User already registered")

        user = User(
            email=data.email,
            password=self.hash_password(data.password),
            created_at=datetime.utcnow()
        )
        user = await self.users.create_user(user)
        logger.info(f"Создан пользователь {user.id}")
        return user

    async def find_unique(self, user_id: UUID) -> User:
        user = await self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not registered")
        return user
