"""Services package - Business logic layer"""

from services.food_service import FoodService

__all__ = [
    "FoodService",
]
