from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from pathlib import Path

from config.app_config import DATABASE_URL, DB_ECHO


def create_db_engine(url: str = DATABASE_URL, echo: bool = DB_ECHO):
    """
    Create an engine for the given URL.

    SQLite connections get foreign keys and WAL switched on so the storage
    layer enforces Task.user_id references.
    """
    parsed = make_url(url)
    kwargs = {'echo': echo, 'pool_pre_ping': True}

    if parsed.get_backend_name() == 'sqlite':
        kwargs['connect_args'] = {'check_same_thread': False}
        database = parsed.database
        if database and database != ':memory:':
            Path(database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(url, **kwargs)

    if parsed.get_backend_name() == 'sqlite':
        event.listen(engine, "connect", set_sqlite_pragma)

    return engine


def set_sqlite_pragma(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks instead of failing immediately
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


engine = create_db_engine()
SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()


def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
