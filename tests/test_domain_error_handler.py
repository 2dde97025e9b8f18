"""Tests for domain errors and how they are rendered in the response envelope."""
import json

import pytest
from fastapi.exceptions import RequestValidationError

from powerscore.core.error_handlers import (
    ERROR_STATUS_MAP,
    domain_error_handler,
    request_validation_handler,
    status_for,
)
from powerscore.core.exceptions import (
    BusinessRuleError,
    ConfigurationError,
    DomainError,
    NotFoundError,
    UnscorableAssessmentError,
    ValidationError,
)


class StubRequest:
    """Stands in for a Request; only ``state.request_id`` is read."""

    def __init__(self, **state):
        self.state = type("State", (), state)()


def _body(response) -> dict:
    return json.loads(response.body.decode())


class TestErrorCodes:
    """Codes, messages and details built by each error class."""

    def test_base_error_keeps_fields(self):
        err = DomainError("X_042", "something broke", {"k": 1})

        assert (err.code, err.message, err.details) == ("X_042", "something broke", {"k": 1})
        assert str(err) == "something broke"

    def test_not_found_code_derives_from_entity(self):
        err = NotFoundError("metric", "Unknown metric 'flexibility'", {"metric": "flexibility"})

        assert err.code == "NF_METRIC_001"
        assert err.details == {"metric": "flexibility"}

    def test_not_found_defaults(self):
        err = NotFoundError("standards_row")

        assert err.code == "NF_STANDARDS_ROW_001"
        assert err.message == "standards_row not found"
        assert err.details == {}

    def test_validation_error_names_field(self):
        err = ValidationError("sex", "unknown value 'x'")

        assert err.code == "VAL_SEX_001"
        assert err.message == "Validation failed for sex: unknown value 'x'"
        assert err.details == {"field": "sex"}

    def test_business_rule_and_configuration_defaults(self):
        assert BusinessRuleError("cannot score").code == "BR_001"
        assert BusinessRuleError("cannot score").details == {}
        assert ConfigurationError("standards file missing").code == "CFG_001"

    def test_unscorable_assessment(self):
        err = UnscorableAssessmentError("power")

        assert isinstance(err, BusinessRuleError)
        assert err.code == "BR_UNSCORABLE_001"
        assert err.message == "power assessment could not be scored with the given inputs"
        assert err.details == {"assessment": "power"}


class TestStatusFor:
    """HTTP status selection."""

    @pytest.mark.parametrize(
        "error, expected",
        [
            (NotFoundError("metric"), 404),
            (ValidationError("age", "negative"), 400),
            (BusinessRuleError("no"), 422),
            (ConfigurationError("broken"), 500),
            (DomainError("X_001", "unmapped"), 500),
        ],
    )
    def test_mapped_statuses(self, error, expected):
        assert status_for(error) == expected

    def test_subclass_uses_parent_status(self):
        assert UnscorableAssessmentError not in ERROR_STATUS_MAP
        assert status_for(UnscorableAssessmentError("cardio")) == 422


class TestDomainErrorHandler:
    """Rendering of DomainError subclasses."""

    @pytest.mark.asyncio
    async def test_envelope_shape(self):
        err = NotFoundError("metric", "Unknown metric 'flexibility'", {"metric": "flexibility"})

        response = await domain_error_handler(StubRequest(request_id="req-7"), err)

        assert response.status_code == 404
        body = _body(response)
        assert body["data"] is None
        assert body["meta"]["request_id"] == "req-7"
        assert body["meta"]["timestamp"].endswith("Z")
        assert body["errors"] == [
            {
                "code": "NF_METRIC_001",
                "message": "Unknown metric 'flexibility'",
                "details": {"metric": "flexibility"},
            }
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error, status_code, code",
        [
            (ValidationError("age", "must be positive"), 400, "VAL_AGE_001"),
            (UnscorableAssessmentError("muscle"), 422, "BR_UNSCORABLE_001"),
            (ConfigurationError("broken standards"), 500, "CFG_001"),
        ],
    )
    async def test_status_and_code(self, error, status_code, code):
        response = await domain_error_handler(StubRequest(request_id="r"), error)

        assert response.status_code == status_code
        assert _body(response)["errors"][0]["code"] == code

    @pytest.mark.asyncio
    async def test_request_without_id(self):
        response = await domain_error_handler(StubRequest(), NotFoundError("metric"))

        assert _body(response)["meta"]["request_id"] is None


class TestRequestValidationHandler:
    """Rendering of request body validation failures."""

    @pytest.mark.asyncio
    async def test_one_error_per_field(self):
        exc = RequestValidationError([
            {"loc": ("body", "age"), "msg": "Value error, age out of range", "type": "value_error"},
            {"loc": ("body", "lifts", 0, "reps"), "msg": "Value error, too many reps", "type": "value_error"},
        ])

        response = await request_validation_handler(StubRequest(request_id="req-9"), exc)

        assert response.status_code == 422
        body = _body(response)
        assert body["data"] is None
        assert body["meta"]["request_id"] == "req-9"
        assert [e["code"] for e in body["errors"]] == ["VAL_REQUEST_001", "VAL_REQUEST_001"]
        assert body["errors"][0]["details"] == {"field": "body.age"}
        assert body["errors"][1]["details"] == {"field": "body.lifts.0.reps"}
        assert body["errors"][1]["message"] == "Value error, too many reps"
