"""
Domain layer - ORM models and pydantic schemas.
"""

from domain import models, schemas

__all__ = ["models", "schemas"]
