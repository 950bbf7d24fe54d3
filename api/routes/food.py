"""Food CRUD routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import Annotated

from app.exceptions import FoodNotFoundError
from app.messages import SuccessMessages
from domain.models import get_db_session
from domain.schemas.food_schemas import (
    FoodCreate,
    FoodListQuery,
    FoodCreatedResponse,
    FoodListItem,
    FoodListResponse,
    FoodDetailResponse,
    MessageResponse,
    Pagination,
)
from services.food_service import FoodService

router = APIRouter(prefix="/food", tags=["Food"])
logger = logging.getLogger("foodapi.api.food")


@router.post("", response_model=FoodCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_food(payload: FoodCreate, db: Session = Depends(get_db_session)):
    """Create a food from {name, calorieAmount} and return its id"""
    food = FoodService.create_food(db, payload)
    return FoodCreatedResponse(message=SuccessMessages.POST, food_id=food.food_id)


@router.get("", response_model=FoodListResponse)
def list_foods(
    query: Annotated[FoodListQuery, Query()],
    db: Session = Depends(get_db_session),
):
    """
    Get one page of foods.

    - **page**: zero-based page number
    - **limit**: foods per page

    `pagination.maxPage` is the index of the last page (-1 when there are no foods).
    """
    rows, last_page = FoodService.list_foods(db, query)
    return FoodListResponse(
        message=SuccessMessages.GET_ALL,
        foods=[
            FoodListItem(food_id=row.food_id, name=row.name, calorie_amount=row.calorie_amount)
            for row in rows
        ],
        pagination=Pagination(page=query.page, limit=query.limit, max_page=last_page),
    )


@router.get("/{food_id}", response_model=FoodDetailResponse)
def get_food(food_id: UUID, db: Session = Depends(get_db_session)):
    """Get the name and calorie amount of a single food"""
    food = FoodService.get_food(db, food_id)
    if food is None:
        raise FoodNotFoundError(food_id)
    return FoodDetailResponse(
        message=SuccessMessages.GET,
        name=food.name,
        calorie_amount=food.calorie_amount,
    )


@router.put("/{food_id}", response_model=MessageResponse)
def update_food(food_id: UUID, payload: FoodCreate, db: Session = Depends(get_db_session)):
    """Replace name and calorieAmount of an existing food"""
    FoodService.update_food(db, food_id, payload)
    return MessageResponse(message=SuccessMessages.PUT)


@router.delete("/{food_id}", response_model=MessageResponse)
def delete_food(food_id: UUID, db: Session = Depends(get_db_session)):
    """Delete a food"""
    FoodService.delete_food(db, food_id)
    return MessageResponse(message=SuccessMessages.DELETE)
