"""Error Hierarchy — verifies HTTP status, codes and the response envelope."""

import pytest

from bootcamp.core.errors import (
    AuthenticationError,
    BootcampError,
    ConflictError,
    DeliveryError,
    ErrorCategory,
    NotFoundError,
    PersistenceError,
    ValidationError,
)


@pytest.mark.parametrize("error, status, code", [
    (ValidationError("bad", field="title"), 400, "VALIDATION_ERROR"),
    (AuthenticationError(), 401, "AUTHENTICATION_FAILED"),
    (NotFoundError("Track", 3), 404, "RESOURCE_NOT_FOUND"),
    (ConflictError("dup"), 409, "CONFLICT"),
    (DeliveryError("smtp down", "admission.html"), 502, "DELIVERY_ERROR"),
    (PersistenceError("boom", "commit"), 503, "PERSISTENCE_ERROR"),
])
def test_error_status_and_code(error, status, code):
    assert isinstance(error, BootcampError)
    assert error.http_status == status
    assert error.code == code


def test_authentication_error_default_message():
    assert AuthenticationError().message == "Invalid Credentials"


def test_not_found_names_resource():
    error = NotFoundError("Enrollment", 9)
    assert error.message == "Enrollment '9' not found"
    assert error.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert error.context.resource == "Enrollment"
    assert error.context.resource_id == "9"


def test_to_response_uses_envelope():
    body = ConflictError("Resource already exists").to_response()
    assert body["status"] == 409
    assert body["message"] == "Resource already exists"
    assert body["data"]["error"]["code"] == "CONFLICT"
    assert body["data"]["error"]["category"] == "conflict"
    assert "timestamp" in body["data"]["error"]
