"""Application services for whitescreen."""

from whitescreen.services.light_service import LightService

__all__ = [
    "LightService",
]
