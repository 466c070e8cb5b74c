from dietlog.core.config import settings
from dietlog.core.base import Base

__all__ = ["settings", "Base"]
