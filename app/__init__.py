"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and the response message catalog.
"""

from app.config import settings
from app.exceptions import (
    ServiceError,
    ServiceValidationError,
    NotFoundError,
    FoodNotFoundError,
)
from app.messages import SuccessMessages, ErrorMessages

__all__ = [
    "settings",
    "ServiceError",
    "ServiceValidationError",
    "NotFoundError",
    "FoodNotFoundError",
    "SuccessMessages",
    "ErrorMessages",
]
