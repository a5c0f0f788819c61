import os
import sys
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Keep the module-level engine off the developer's real database
os.environ.setdefault('TASKS_DATABASE_URL', 'sqlite:///:memory:')

# Now import after path is set
import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from database import Base, set_sqlite_pragma
import models  # noqa: F401


@pytest.fixture
def engine():
    """In-memory engine with foreign keys enforced"""
    engine = create_engine('sqlite:///:memory:')
    event.listen(engine, "connect", set_sqlite_pragma)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create in-memory database for testing"""
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def make_user():
    def _make(**overrides):
        fields = {
            "name": "Ada Lovelace",
            "email": "ada@example.com",
            "password": "$2b$12$hashedpasswordvalue",
            "role": "user",
        }
        fields.update(overrides)
        return models.User(**fields)
    return _make
