from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base

from config.db_config import DATABASE_URL, DEFAULT_DB_PATH, SQL_ECHO


def build_engine(url: str = DATABASE_URL, echo: bool = SQL_ECHO):
    """Create an engine; SQLite connections get foreign keys switched on."""
    is_sqlite = url.startswith("sqlite")
    connect_args = {'check_same_thread': False} if is_sqlite else {}
    new_engine = create_engine(url, connect_args=connect_args, echo=echo, pool_pre_ping=True)

    if is_sqlite:
        @event.listens_for(new_engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


if DATABASE_URL == f"sqlite:///{DEFAULT_DB_PATH}":
    Path(DEFAULT_DB_PATH).parent.mkdir(parents=True, exist_ok=True)

engine = build_engine()
SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()


def get_db():
    """Yield a session for one request; the caller owns commit/rollback"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def session_scope(session_factory=None):
    """
    Provide a transactional scope around a series of repository operations.

    Commits on success, rolls back on any exception and always closes.

    Example:
        with session_scope() as db:
            TeacherRepository(db).insert(teacher)
    """
    db = (session_factory or SessionLocal)()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
