"""
Food Repository - Data access layer for the Food table
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.engine import Row
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.exceptions import FoodNotFoundError
from domain.models.food import Food
from repositories.base import BaseRepository


class FoodRepository(BaseRepository[Food]):
    """Repository for food data access"""

    def __init__(self, db: Session):
        super().__init__(db, Food)

    def get_details(self, food_id: UUID) -> Optional[Row]:
        """Get (name, calorie_amount) of one food, or None"""
        return (
            self.db.query(Food.name, Food.calorie_amount)
            .filter(Food.food_id == food_id)
            .first()
        )

    def get_page(self, skip: int, limit: int) -> List[Row]:
        """Get (food_id, name, calorie_amount) rows for one page"""
        return (
            self.db.query(Food.food_id, Food.name, Food.calorie_amount)
            .order_by(Food.name, Food.food_id)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def create_food(self, name: str, calorie_amount: float) -> Food:
        """Insert a food; the store assigns its id"""
        return self.create(Food(name=name, calorie_amount=calorie_amount))

    def replace(self, food_id: UUID, name: str, calorie_amount: float) -> None:
        """
        Overwrite name and calorie_amount of an existing food.

        Raises:
            FoodNotFoundError: no row has this id
        """
        try:
            updated = (
                self.db.query(Food)
                .filter(Food.food_id == food_id)
                .update(
                    {Food.name: name, Food.calorie_amount: calorie_amount},
                    synchronize_session=False,
                )
            )
            if updated == 0:
                self.db.rollback()
                raise FoodNotFoundError(food_id)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def delete_by_id(self, food_id: UUID) -> None:
        """
        Delete a food.

        Raises:
            FoodNotFoundError: no row has this id
        """
        try:
            deleted = (
                self.db.query(Food)
                .filter(Food.food_id == food_id)
                .delete(synchronize_session=False)
            )
            if deleted == 0:
                self.db.rollback()
                raise FoodNotFoundError(food_id)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
