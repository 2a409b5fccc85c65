"""Database package: async engine, session scope, Base, FastAPI dependency."""
from fixit_admin.db.base import Base, create_tables, engine, get_db, session_scope

__all__ = ["Base", "create_tables", "engine", "get_db", "session_scope"]
