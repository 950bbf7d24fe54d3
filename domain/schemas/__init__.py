"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.food_schemas import (
    FoodCreate,
    FoodBase,
    FoodListQuery,
    MessageResponse,
    FoodCreatedResponse,
    FoodListItem,
    Pagination,
    FoodListResponse,
    FoodDetailResponse,
)

__all__ = [
    # Request schemas
    "FoodCreate",
    "FoodListQuery",
    # Stored shape
    "FoodBase",
    # Response schemas
    "MessageResponse",
    "FoodCreatedResponse",
    "FoodListItem",
    "Pagination",
    "FoodListResponse",
    "FoodDetailResponse",
]
