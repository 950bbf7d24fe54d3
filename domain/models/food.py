"""
Food model - the single table served by the /food resource.
"""

from sqlalchemy import Column, Text, Float, Uuid, CheckConstraint
import uuid

from domain.models.database import Base


class Food(Base):
    """
    A named food and the calories it carries.

    The primary key is assigned on insert and never changes afterwards;
    updates replace ``name`` and ``calorie_amount`` together.
    """

    __tablename__ = "Food"

    food_id = Column("id", Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    calorie_amount = Column("calorieAmount", Float, nullable=False)

    __table_args__ = (
        CheckConstraint('"calorieAmount" >= 0', name="ck_food_calorie_amount_non_negative"),
    )

    def __repr__(self):
        return f"<Food(id={self.food_id}, name='{self.name}')>"
