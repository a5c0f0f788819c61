"""
Request validation

One validator per request DTO. Each returns the ordered list of field
violations for a raw payload; an empty list means the payload is valid.
The DTO classes are built once at import and only read here, so the
validators are safe to call from concurrent request handlers.
"""

from typing import Any, List, Mapping, Type, TypeVar, Union
import logging

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from constants import ValidationTag
from exceptions import ValidationError
from dtos.request.auth_request import (
    SignUpInput,
    SignInInput,
    ForgotPasswordInput,
    ResetPasswordInput,
)
from dtos.request.task_request import TaskInput
from dtos.response.error_response import Violation

logger = logging.getLogger(__name__)

M = TypeVar('M', bound=BaseModel)

Payload = Union[Mapping[str, Any], BaseModel]


def _field_names_by_alias(model_cls: Type[BaseModel]) -> dict:
    names = {}
    for name, field in model_cls.model_fields.items():
        names[name] = name
        if field.alias:
            names[field.alias] = name
    return names


def _to_violation(model_cls: Type[BaseModel], error: dict, names: dict) -> Violation:
    loc = error.get('loc') or ()
    field_name = names.get(loc[0], str(loc[0])) if loc else None
    path = f"{model_cls.__name__}.{field_name}" if field_name else model_cls.__name__

    error_type = error.get('type', '')
    ctx = error.get('ctx') or {}
    raw = error.get('input')

    field = model_cls.model_fields.get(field_name) if field_name else None
    required = field is not None and field.is_required()

    if error_type == 'missing' or (required and raw in (None, '')):
        return Violation(field=path, tag=ValidationTag.REQUIRED)
    if error_type == 'string_too_short':
        return Violation(field=path, tag=ValidationTag.MIN, value=str(ctx.get('min_length')))
    if error_type == 'string_too_long':
        return Violation(field=path, tag=ValidationTag.MAX, value=str(ctx.get('max_length')))
    if error_type.endswith('_type') or error_type.endswith('_parsing'):
        return Violation(field=path, tag=ValidationTag.TYPE)
    return Violation(field=path, tag=ValidationTag.INVALID, value=error_type or None)


def validate_payload(model_cls: Type[BaseModel], payload: Payload) -> List[Violation]:
    """
    Apply a DTO's constraint set to a payload.

    Args:
        model_cls: Request DTO class
        payload: Decoded JSON body, or an instance of model_cls

    Returns:
        Violations in field declaration order, at most one per field
    """
    if isinstance(payload, BaseModel):
        payload = payload.model_dump()

    try:
        model_cls.model_validate(payload)
    except PydanticValidationError as e:
        names = _field_names_by_alias(model_cls)
        violations = []
        seen = set()
        for error in e.errors():
            violation = _to_violation(model_cls, error, names)
            if violation.field in seen:
                continue
            seen.add(violation.field)
            violations.append(violation)
        logger.debug(
            f"{model_cls.__name__} failed validation on {[v.field for v in violations]}"
        )
        return violations
    return []


def validate_sign_up(payload: Payload) -> List[Violation]:
    return validate_payload(SignUpInput, payload)


def validate_sign_in(payload: Payload) -> List[Violation]:
    return validate_payload(SignInInput, payload)


def validate_task(payload: Payload) -> List[Violation]:
    return validate_payload(TaskInput, payload)


def validate_forgot_password(payload: Payload) -> List[Violation]:
    return validate_payload(ForgotPasswordInput, payload)


def validate_reset_password(payload: Payload) -> List[Violation]:
    return validate_payload(ResetPasswordInput, payload)


def parse_or_raise(model_cls: Type[M], payload: Payload) -> M:
    """
    Build a DTO or raise with the full violation list.

    Raises:
        ValidationError: If the payload violates any constraint
    """
    violations = validate_payload(model_cls, payload)
    if violations:
        raise ValidationError(f"Invalid {model_cls.__name__} payload", violations)
    if isinstance(payload, model_cls):
        return payload
    return model_cls.model_validate(payload)
