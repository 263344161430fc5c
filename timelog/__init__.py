"""
TimeLog package entry point

Exposes the main sub-packages for convenient imports.
"""

from . import (
    config,
    crud,
    db,
    models,
    schemas,
    core,
    services,
)

from .config import settings
from .db import get_db, engine, Base

__all__ = [
    "config",
    "crud",
    "db",
    "models",
    "schemas",
    "core",
    "services",
    "settings",
    "get_db",
    "engine",
    "Base",
]
