"""
Database entry point

Re-exports the pieces implemented in the database package.
"""

from .database.connection import engine, get_db, Base, SessionLocal

__all__ = ["engine", "get_db", "Base", "SessionLocal"]
