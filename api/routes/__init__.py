"""API routes package"""

from . import food, health

__all__ = ["food", "health"]
