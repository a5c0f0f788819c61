"""
UUID generation helper for the application.

Provides consistent, time-ordered identity generation across all models.
"""
import logging
import uuid

from exceptions import IdentityGenerationError, MalformedIdentityError

logger = logging.getLogger(__name__)


def generate_uuid(entity: str = "entity") -> str:
    """
    Generate a new time-based UUID string.

    Args:
        entity: Name of the entity the identity is for (used in errors)

    Returns:
        str: A new UUID1 string

    Raises:
        IdentityGenerationError: If the node id or clock could not be read
    """
    try:
        return str(uuid.uuid1())
    except (OSError, ValueError) as e:
        logger.error(f"Identity generation failed for {entity}: {e}")
        raise IdentityGenerationError(entity, f"Failed to generate identity for new {entity}: {e}") from e


def parse_uuid(value, entity: str, field: str) -> uuid.UUID:
    """
    Parse a stored identity string into a UUID.

    Raises:
        MalformedIdentityError: If the value is not a well-formed UUID
    """
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(value)
    except (TypeError, ValueError, AttributeError) as e:
        raise MalformedIdentityError(entity, field, value) from e
