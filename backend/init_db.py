from sqlalchemy.exc import SQLAlchemyError
import logging

from database import engine as default_engine, Base
from exceptions import DatabaseError
from services.schema_validator import SchemaValidator

# Register the mapped tables on Base.metadata
import models  # noqa: F401

logger = logging.getLogger(__name__)


def init_database(engine=None) -> dict:
    """
    Create any missing tables and report schema drift.

    Args:
        engine: Engine to initialise (defaults to the configured one)

    Returns:
        SchemaValidator.check result

    Raises:
        DatabaseError: If the tables cannot be created
    """
    engine = engine or default_engine

    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        logger.error(f"Failed to create tables: {e}")
        raise DatabaseError("create_all", f"Failed to create tables: {e}") from e

    status = SchemaValidator.check(engine)
    if status["valid"]:
        logger.info(f"Database initialized at {engine.url.render_as_string(hide_password=True)}")
    return status


if __name__ == "__main__":
    from utils.logging_utils import configure_logging

    configure_logging()
    result = init_database()
    for issue in result["issues"]:
        logger.warning(issue)
