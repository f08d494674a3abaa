"""SQLAlchemy ORM models."""

from taskapi.models.base import Base
from taskapi.models.task import Task
from taskapi.models.user import User

__all__ = ["Base", "Task", "User"]
