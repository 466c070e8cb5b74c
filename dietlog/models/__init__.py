from dietlog.models.user import User
from dietlog.models.meal import Meal

__all__ = ["User", "Meal"]
