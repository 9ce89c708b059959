from app.database.base import Base
from app.database.engine import build_engine, engine
from app.database.migrations import apply_migrations, current_version, reset_database
from app.database.session import SessionLocal, get_db, make_session_factory

__all__ = [
    "Base",
    "SessionLocal",
    "apply_migrations",
    "build_engine",
    "current_version",
    "engine",
    "get_db",
    "make_session_factory",
    "reset_database",
]
