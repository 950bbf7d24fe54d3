"""
Error handling and edge case tests.

Covers:
- Unexpected store errors mapped to 500 by the generic handler
- Validation error categorisation (path / body / query)
- Exception payloads
- Request logging middleware headers
- Settings validation
"""

import uuid

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import OperationalError

from test_fixtures import client, lenient_client, food_payload
from services.food_service import FoodService
from api.middleware import make_serializable, validation_message
from app.config import Settings, Environment
from app.exceptions import (
    FoodNotFoundError,
    NotFoundError,
    ServiceError,
    ServiceValidationError,
)
from app.messages import ErrorMessages


# =============================================================================
# UNEXPECTED ERRORS
# =============================================================================


def test_store_failure_on_create_returns_500(monkeypatch):
    def broken_create(db, payload):
        raise OperationalError("INSERT INTO \"Food\"", {}, Exception("connection lost"))

    monkeypatch.setattr(FoodService, "create_food", broken_create)
    r = lenient_client.post("/food", json=food_payload())

    assert r.status_code == 500
    assert r.json() == {"message": ErrorMessages.INTERNAL, "code": "INTERNAL_SERVER_ERROR"}


def test_store_failure_on_delete_is_not_reported_as_404(monkeypatch):
    def broken_delete(db, food_id):
        raise RuntimeError("database is locked")

    monkeypatch.setattr(FoodService, "delete_food", broken_delete)
    r = lenient_client.delete(f"/food/{uuid.uuid4()}")
    assert r.status_code == 500


def test_store_failure_propagates_with_strict_client(monkeypatch):
    def broken_list(db, query):
        raise RuntimeError("boom")

    monkeypatch.setattr(FoodService, "list_foods", broken_list)
    with pytest.raises(RuntimeError):
        client.get("/food")


# =============================================================================
# VALIDATION CATEGORIES
# =============================================================================


@pytest.mark.parametrize(
    "locations, expected",
    [
        ([("path", "food_id")], ErrorMessages.REQ_PARAMS),
        ([("body", "name")], ErrorMessages.REQ_BODY),
        ([("query", "page")], ErrorMessages.REQ_QUERIES),
        ([("body", "name"), ("path", "food_id")], ErrorMessages.REQ_PARAMS),
        ([("query", "limit"), ("body",)], ErrorMessages.REQ_BODY),
    ],
)
def test_validation_message_priority(locations, expected):
    errors = [{"loc": loc, "msg": "bad", "type": "value_error"} for loc in locations]
    assert validation_message(errors) == expected


def test_make_serializable_keeps_loc_msg_type():
    errors = [
        {
            "loc": ("body", "calorieAmount"),
            "msg": "Input should be greater than or equal to 0",
            "type": "greater_than_equal",
            "input": float("nan"),
            "ctx": {"ge": 0},
        }
    ]
    assert make_serializable(errors) == [
        {
            "loc": ["body", "calorieAmount"],
            "msg": "Input should be greater than or equal to 0",
            "type": "greater_than_equal",
        }
    ]


def test_validation_details_name_offending_field():
    r = client.post("/food", json={"name": "Apple", "calorieAmount": -3})
    assert r.status_code == 400
    locs = [d["loc"] for d in r.json()["details"]]
    assert ["body", "calorieAmount"] in locs


# =============================================================================
# EXCEPTION PAYLOADS
# =============================================================================


def test_food_not_found_payload():
    food_id = uuid.uuid4()
    exc = FoodNotFoundError(food_id)

    assert exc.http_status == 404
    assert isinstance(exc, NotFoundError)
    assert exc.to_dict() == {
        "message": ErrorMessages.NOT_FOUND,
        "code": "FOOD_NOT_FOUND",
        "details": {"id": str(food_id)},
    }


def test_service_errors_default_messages():
    assert ServiceValidationError().to_dict() == {"message": "Invalid input"}
    assert ServiceValidationError().http_status == 400
    assert str(NotFoundError()) == "Not found"
    assert ServiceError("x", code="C").to_dict() == {"message": "x", "code": "C"}


# =============================================================================
# MIDDLEWARE
# =============================================================================


def test_request_logging_headers():
    r = client.get("/health-check")
    assert uuid.UUID(r.headers["X-Request-ID"])
    assert float(r.headers["X-Process-Time"]) >= 0


def test_unknown_route_is_404():
    r = client.get("/foods")
    assert r.status_code == 404


# =============================================================================
# SETTINGS
# =============================================================================


def test_settings_normalize_environment():
    s = Settings(environment="PRODUCTION")
    assert s.environment is Environment.PRODUCTION
    assert s.is_production()
    assert not s.is_development()


def test_settings_reject_default_page_size_above_max():
    with pytest.raises(ValidationError):
        Settings(default_page_size=200, max_page_size=100)
