"""Food service - business operations behind the /food endpoints."""

from typing import Optional, Tuple, List
from sqlalchemy.engine import Row
from sqlalchemy.orm import Session
import logging
import math
from uuid import UUID

from app.exceptions import FoodNotFoundError
from domain.schemas.food_schemas import FoodBase, FoodCreate, FoodListQuery
from repositories import FoodRepository

logger = logging.getLogger("foodapi.food")


def max_page(total: int, limit: int) -> int:
    """Index of the last page; -1 when there is nothing to page through."""
    return math.ceil(total / limit) - 1


class FoodService:
    """Business logic for food management"""

    @staticmethod
    def create_food(db: Session, payload: FoodCreate) -> FoodBase:
        """
        Insert a food and return its canonical stored shape.

        The inserted row is validated against FoodBase so a malformed store
        result surfaces as an error instead of a bogus id.
        """
        food_repo = FoodRepository(db)
        food = food_repo.create_food(**payload.to_columns())
        stored = FoodBase.model_validate(food)
        logger.info(f"food_created food_id={stored.food_id}")
        return stored

    @staticmethod
    def list_foods(db: Session, query: FoodListQuery) -> Tuple[List[Row], int]:
        """
        Return one page of foods and the index of the last page.

        Returns:
            (rows of (food_id, name, calorie_amount), max_page)
        """
        food_repo = FoodRepository(db)
        rows = food_repo.get_page(skip=query.offset, limit=query.limit)
        total = food_repo.count()
        return rows, max_page(total, query.limit)

    @staticmethod
    def get_food(db: Session, food_id: UUID) -> Optional[Row]:
        """Return (name, calorie_amount) of a food, or None if it does not exist"""
        food = FoodRepository(db).get_details(food_id)
        if food is None:
            logger.warning(f"food_not_found food_id={food_id}")
        return food

    @staticmethod
    def update_food(db: Session, food_id: UUID, payload: FoodCreate) -> None:
        """Replace both fields of an existing food; raises FoodNotFoundError"""
        try:
            FoodRepository(db).replace(food_id, **payload.to_columns())
        except FoodNotFoundError:
            logger.warning(f"food_update_missing food_id={food_id}")
            raise
        logger.info(f"food_updated food_id={food_id}")

    @staticmethod
    def delete_food(db: Session, food_id: UUID) -> None:
        """Delete a food; raises FoodNotFoundError"""
        try:
            FoodRepository(db).delete_by_id(food_id)
        except FoodNotFoundError:
            logger.warning(f"food_delete_missing food_id={food_id}")
            raise
        logger.info(f"food_deleted food_id={food_id}")
