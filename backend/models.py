from sqlalchemy import Column, String, Boolean, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship, validates
from datetime import datetime
import logging

from database import Base
from constants import UserDefaults
from exceptions import IdentityReassignmentError
from utils.uuid_helper import generate_uuid

logger = logging.getLogger(__name__)


class IdentityMixin:
    """
    Assigns a generated identity at construction time.

    The identity is set once, before the row is first added to a session,
    and any later attempt to change it raises IdentityReassignmentError.
    """

    def __init__(self, **kwargs):
        if kwargs.get('id') is None:
            kwargs['id'] = generate_uuid(type(self).__name__)
            logger.debug(f"Assigned identity {kwargs['id']} to new {type(self).__name__}")
        super().__init__(**kwargs)

    @validates('id')
    def _validate_id(self, key, value):
        current = self.id
        if current is not None and value != current:
            raise IdentityReassignmentError(type(self).__name__, current)
        return value


class User(IdentityMixin, Base):
    """
    A user account.

    password holds the externally computed hash. provider, photo and
    verified are filled with their storage defaults on insert; until then
    use the resolved_* accessors.
    """
    __tablename__ = 'users'

    id = Column(String, primary_key=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100), nullable=False, unique=True)
    password = Column(String(100), nullable=False)
    role = Column(String(50), nullable=False)
    provider = Column(String(50), nullable=False, default=UserDefaults.PROVIDER)
    photo = Column(String, nullable=False, default=UserDefaults.PHOTO)
    verified = Column(Boolean, nullable=False, default=UserDefaults.VERIFIED)
    verification_code = Column(String(100))
    password_reset_token = Column(String(100))
    password_reset_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    tasks = relationship("Task", back_populates="user")

    @property
    def resolved_provider(self) -> str:
        return self.provider if self.provider is not None else UserDefaults.PROVIDER

    @property
    def resolved_photo(self) -> str:
        return self.photo if self.photo is not None else UserDefaults.PHOTO

    @property
    def resolved_verified(self) -> bool:
        return self.verified if self.verified is not None else UserDefaults.VERIFIED

    def __repr__(self):
        return f"<User id={self.id} email={self.email}>"


class Task(IdentityMixin, Base):
    __tablename__ = 'tasks'

    id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey('users.id'), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    status = Column(String(50), nullable=False)  # To Do, In Progress, Completed
    deadline = Column(DateTime)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", back_populates="tasks")

    __table_args__ = (
        Index('idx_tasks_user_id', 'user_id'),
    )

    def __repr__(self):
        return f"<Task id={self.id} status={self.status}>"
