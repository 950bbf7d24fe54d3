"""
Pydantic schemas for the food resource.

Wire names are camelCase (``calorieAmount``); attributes are snake_case and
match the ORM model so results can be validated straight from rows.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing import List
from uuid import UUID

from app.config import settings


class FoodCreate(BaseModel):
    """Request body for creating or fully replacing a food"""

    name: str = Field(..., min_length=1, max_length=255, description="Food name")
    calorie_amount: float = Field(
        ...,
        alias="calorieAmount",
        ge=0,
        strict=True,
        allow_inf_nan=False,
        description="Calories per serving",
    )

    model_config = ConfigDict(str_strip_whitespace=True)

    def to_columns(self) -> dict:
        """Column values for an insert or a full-field update"""
        return {"name": self.name, "calorie_amount": self.calorie_amount}


class FoodBase(BaseModel):
    """Canonical stored shape of a food row"""

    food_id: UUID = Field(
        ..., validation_alias=AliasChoices("food_id", "id"), serialization_alias="id"
    )
    name: str
    calorie_amount: float = Field(
        ...,
        validation_alias=AliasChoices("calorie_amount", "calorieAmount"),
        serialization_alias="calorieAmount",
    )

    model_config = ConfigDict(from_attributes=True)


class FoodListQuery(BaseModel):
    """Pagination query parameters for GET /food"""

    page: int = Field(default=0, ge=0, description="Zero-based page number")
    limit: int = Field(
        default=settings.default_page_size,
        ge=1,
        le=settings.max_page_size,
        description="Number of foods per page",
    )

    @field_validator("page", "limit", mode="before")
    @classmethod
    def require_whole_number(cls, v):
        """Query strings must be plain integers; "1.0" or "1e1" are rejected"""
        if isinstance(v, str) and not v.strip().lstrip("-").isdigit():
            raise ValueError("must be a whole number")
        return v

    @property
    def offset(self) -> int:
        return self.page * self.limit


class MessageResponse(BaseModel):
    message: str


class FoodCreatedResponse(MessageResponse):
    food_id: UUID = Field(..., alias="id")

    model_config = ConfigDict(populate_by_name=True)


class FoodListItem(BaseModel):
    food_id: UUID = Field(..., alias="id")
    name: str
    calorie_amount: float = Field(..., alias="calorieAmount")

    model_config = ConfigDict(populate_by_name=True)


class Pagination(BaseModel):
    page: int
    limit: int
    max_page: int = Field(..., alias="maxPage")

    model_config = ConfigDict(populate_by_name=True)


class FoodListResponse(MessageResponse):
    foods: List[FoodListItem]
    pagination: Pagination


class FoodDetailResponse(MessageResponse):
    name: str
    calorie_amount: float = Field(..., alias="calorieAmount")

    model_config = ConfigDict(populate_by_name=True)
