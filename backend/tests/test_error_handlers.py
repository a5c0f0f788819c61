import asyncio

import pytest
from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError

from dtos.response import Violation
from exceptions import ApplicationError, MalformedIdentityError, ValidationError
from utils import handle_api_errors, raise_for_violations


def _raising(exc):
    @handle_api_errors("Sign up")
    def endpoint():
        raise exc
    return endpoint


def test_validation_error_becomes_bad_request():
    violations = [Violation(field="SignUpInput.email", tag="required")]

    with pytest.raises(HTTPException) as excinfo:
        _raising(ValidationError("bad payload", violations))()

    assert excinfo.value.status_code == 400
    assert excinfo.value.detail == [{"field": "SignUpInput.email", "tag": "required"}]


def test_integrity_error_becomes_conflict():
    error = IntegrityError("INSERT INTO users", {}, Exception("UNIQUE constraint failed: users.email"))

    with pytest.raises(HTTPException) as excinfo:
        _raising(error)()

    assert excinfo.value.status_code == 409


def test_malformed_identity_is_server_error():
    with pytest.raises(HTTPException) as excinfo:
        _raising(MalformedIdentityError("Task", "id", "bad"))()

    assert excinfo.value.status_code == 500


def test_application_and_unexpected_errors_are_server_errors():
    for exc in (ApplicationError("boom"), RuntimeError("boom")):
        with pytest.raises(HTTPException) as excinfo:
            _raising(exc)()
        assert excinfo.value.status_code == 500


def test_http_exception_passes_through():
    with pytest.raises(HTTPException) as excinfo:
        _raising(HTTPException(status_code=404, detail="missing"))()

    assert excinfo.value.status_code == 404
    assert excinfo.value.detail == "missing"


def test_async_endpoints_are_wrapped():
    @handle_api_errors("Create task")
    async def endpoint():
        raise ValidationError("bad", [Violation(field="TaskInput.title", tag="required")])

    with pytest.raises(HTTPException) as excinfo:
        asyncio.run(endpoint())

    assert excinfo.value.status_code == 400


def test_return_value_is_untouched():
    @handle_api_errors("Sign in")
    def endpoint():
        return {"ok": True}

    assert endpoint() == {"ok": True}


def test_raise_for_violations():
    raise_for_violations([])

    with pytest.raises(HTTPException) as excinfo:
        raise_for_violations([Violation(field="SignUpInput.password", tag="min", value="8")])

    assert excinfo.value.status_code == 400
    assert excinfo.value.detail == [{"field": "SignUpInput.password", "tag": "min", "value": "8"}]
