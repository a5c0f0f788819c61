"""
Base repository providing common CRUD operations.

Integrity errors raised by the database (duplicate email, unknown owner)
are not caught here; they reach the caller unchanged.
"""

from typing import Generic, TypeVar, Optional, Type, Any
from sqlalchemy.orm import Session

from utils.logging_utils import log_operation

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Generic base repository providing common CRUD operations.
    All specific repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    @log_operation("create_record")
    def create(self, obj: T) -> T:
        """
        Insert a new record.

        The object already carries its identity (assigned at construction),
        so the flush only writes the row and fills storage defaults.

        Args:
            obj: Model instance to create

        Returns:
            Created model instance
        """
        self.db.add(obj)
        self.db.flush()
        return obj

    def get_by_id(self, id: str) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        return self.db.get(self.model, id)

    @log_operation("update_record")
    def update(self, obj: T, **changes: Any) -> T:
        """
        Apply attribute changes to a record and flush them.

        Args:
            obj: Model instance to update
            **changes: Column values to set

        Returns:
            Updated model instance

        Raises:
            AttributeError: If a change names an unknown column
        """
        for key, value in changes.items():
            if not hasattr(self.model, key):
                raise AttributeError(f"{self.model.__name__} has no attribute '{key}'")
            setattr(obj, key, value)
        self.db.flush()
        return obj

    def delete(self, obj: T) -> None:
        self.db.delete(obj)
        self.db.flush()

    def delete_by_id(self, id: str) -> bool:
        """
        Delete a record by its ID.

        Returns:
            True if deleted, False if not found
        """
        obj = self.get_by_id(id)
        if obj:
            self.delete(obj)
            return True
        return False

    def count(self) -> int:
        return self.db.query(self.model).count()

    def exists(self, id: str) -> bool:
        return self.db.query(self.model).filter(self.model.id == id).count() > 0
