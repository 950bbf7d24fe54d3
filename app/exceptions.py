from typing import Any, Optional

from app.messages import ErrorMessages


class ServiceError(Exception):
    """Base class for errors that map directly onto an HTTP response.

    Attributes:
        message: human-readable message, always present in the response body
        details: optional mapping or list with extra context (field errors, ids)
        code: optional machine-readable error code
        http_status: status code the exception handlers answer with
    """

    http_status = 500
    default_message = "Internal error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Any] = None,
        code: Optional[str] = None,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(ServiceError):
    """Raised when request input is invalid. http_status is 400."""

    http_status = 400
    default_message = "Invalid input"


class NotFoundError(ServiceError):
    """Raised when a requested resource was not found. http_status is 404."""

    http_status = 404
    default_message = "Not found"


class FoodNotFoundError(NotFoundError):
    """Raised by the food repository when no row matches the given id."""

    def __init__(self, food_id: Any, message: Optional[str] = None):
        super().__init__(
            message or ErrorMessages.NOT_FOUND,
            details={"id": str(food_id)},
            code="FOOD_NOT_FOUND",
        )
        self.food_id = food_id

