"""
User repository for account lookups used by the auth handlers.
"""

from typing import Optional
from sqlalchemy.orm import Session, selectinload

from models import User
from .base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User model operations."""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(self.model).filter(self.model.email == email).first()

    def get_by_verification_code(self, code: str) -> Optional[User]:
        """
        Find the user holding an email verification code.

        Args:
            code: Code sent in the verification email

        Returns:
            User or None if no account holds the code
        """
        return self.db.query(self.model).filter(
            self.model.verification_code == code
        ).first()

    def get_by_reset_token(self, token: str) -> Optional[User]:
        """
        Find the user holding a password reset token.

        Token expiry is checked by the caller against password_reset_at.
        """
        return self.db.query(self.model).filter(
            self.model.password_reset_token == token
        ).first()

    def get_with_tasks(self, user_id: str) -> Optional[User]:
        return self.db.query(self.model).options(
            selectinload(self.model.tasks)
        ).filter(self.model.id == user_id).first()
