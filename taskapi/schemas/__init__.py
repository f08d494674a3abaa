"""Pydantic request/response schemas."""

from taskapi.schemas.auth import Credentials, TokenResponse
from taskapi.schemas.health import HealthResponse
from taskapi.schemas.task import MessageResponse, TaskCreate, TaskResponse, TaskUpdate

__all__ = [
    "Credentials",
    "HealthResponse",
    "MessageResponse",
    "TaskCreate",
    "TaskResponse",
    "TaskUpdate",
    "TokenResponse",
]
