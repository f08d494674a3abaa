"""Core app configuration, database and security."""

from taskapi.core.config import Settings, get_settings
from taskapi.core.context import AppContext
from taskapi.core.database import get_db

__all__ = ["AppContext", "Settings", "get_db", "get_settings"]
