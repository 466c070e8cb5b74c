from typing import Any, Mapping, Optional


class DietlogError(Exception):
    """Базовая доменная ошибка.

    Атрибуты:
        message: человекочитаемое сообщение
        details: дополнительный контекст (необязательно)
        code: машиночитаемый код ошибки (необязательно)
        http_status: рекомендуемый HTTP-статус для транспортного слоя
    """

    http_status = 500

    def __init__(
        self,
        message: str = "Internal error",
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class NotFoundError(DietlogError):
    """Запрошенный ресурс не найден (404)."""

    http_status = 404

    def __init__(self, message: str = "Not found", **kwargs):
        super().__init__(message, **kwargs)


class UnauthorizedError(DietlogError):
    """Действие не разрешено текущему пользователю (401)."""

    http_status = 401

    def __init__(self, message: str = "Unauthorized", **kwargs):
        super().__init__(message, **kwargs)


class ConflictError(DietlogError):
    """Конфликт при записи, например дубликат ключа (409)."""

    http_status = 409

    def __init__(self, message: str = "Conflict", **kwargs):
        super().__init__(message, **kwargs)
