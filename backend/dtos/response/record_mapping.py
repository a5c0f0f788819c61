"""
Shared helper for projecting entities into response DTOs.
"""

from typing import Type, TypeVar
import logging

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from exceptions import IncompleteRecordError

logger = logging.getLogger(__name__)

R = TypeVar('R', bound=BaseModel)


def build_response(response_cls: Type[R], entity: str, **fields) -> R:
    """
    Build a response DTO from entity values.

    Raises:
        IncompleteRecordError: If a required value is unset or has the wrong type
    """
    try:
        return response_cls(**fields)
    except PydanticValidationError as e:
        bad_fields = [str(error['loc'][0]) for error in e.errors() if error.get('loc')]
        logger.error(f"Cannot build {response_cls.__name__} from {entity}: {bad_fields}")
        raise IncompleteRecordError(entity, bad_fields) from e
