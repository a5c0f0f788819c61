"""
Error handling decorators and utilities for API endpoints.

Converts the data layer's exceptions into HTTPException responses so
request handlers can stay free of try/except boilerplate.
"""

from functools import wraps
from typing import Callable, Iterable
import inspect
import logging

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError

from constants import HTTPStatus
from exceptions import (
    ValidationError,
    MalformedIdentityError,
    ApplicationError
)

logger = logging.getLogger(__name__)


def raise_for_violations(violations: Iterable) -> None:
    """
    Raise a 400 HTTPException if there are any validation violations.

    Args:
        violations: Violation records from a dtos.validation validator

    Raises:
        HTTPException: With the serialized violation list as detail
    """
    violations = list(violations)
    if violations:
        raise HTTPException(
            status_code=HTTPStatus.BAD_REQUEST,
            detail=[v.model_dump(exclude_none=True) for v in violations]
        )


def _to_http_exception(operation_name: str, e: Exception) -> HTTPException:
    if isinstance(e, ValidationError):
        logger.warning(f"{operation_name} - Validation error: {e.message}")
        return HTTPException(
            status_code=HTTPStatus.BAD_REQUEST,
            detail=e.details.get("violations") or e.message
        )
    if isinstance(e, IntegrityError):
        logger.warning(f"{operation_name} - Integrity error: {e.orig}")
        return HTTPException(
            status_code=HTTPStatus.CONFLICT,
            detail=f"{operation_name} conflicts with existing data"
        )
    if isinstance(e, MalformedIdentityError):
        logger.error(f"{operation_name} - Malformed identity: {e.message}", exc_info=True)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed: stored record is corrupt"
        )
    if isinstance(e, ApplicationError):
        logger.error(f"{operation_name} - Application error: {e.message}", exc_info=True)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed: {e.message}"
        )
    logger.error(f"{operation_name} - Unexpected error: {e}", exc_info=True)
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=f"{operation_name} failed. Please check server logs or contact support."
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle data layer errors consistently across endpoints.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Sign up")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.post("/auth/register")
        @handle_api_errors("Sign up")
        def sign_up(payload: dict, repo: UserRepository = Depends(get_user_repository)):
            ...
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                raise _to_http_exception(operation_name, e) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise _to_http_exception(operation_name, e) from e

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
