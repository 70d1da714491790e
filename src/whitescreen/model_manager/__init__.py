"""Generic helpers for Pydantic models.

- **PydanticPersistence**: Load/save Pydantic models to JSON with backups
  and atomic writes
- **ObserverManager**: Thread-safe observer list used by services
"""

from whitescreen.model_manager.observer import ObserverManager
from whitescreen.model_manager.persistence import PydanticPersistence

__all__ = [
    "ObserverManager",
    "PydanticPersistence",
]
