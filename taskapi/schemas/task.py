"""Pydantic schemas for task CRUD."""

from pydantic import BaseModel, ConfigDict, Field

TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 10_000


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str = Field(default="", max_length=DESCRIPTION_MAX_LENGTH)


class TaskUpdate(BaseModel):
    """Fields left out (or null) keep their stored value."""

    title: str | None = Field(default=None, min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)

    def changes(self) -> dict[str, str]:
        return self.model_dump(exclude_none=True)


class TaskResponse(BaseModel):
    """Task as returned to its owner."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    title: str
    description: str
    user_id: int = Field(..., alias="userId")


class MessageResponse(BaseModel):
    message: str
