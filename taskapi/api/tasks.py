"""Task CRUD for the authenticated user. Every query is scoped to (task id, caller id)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from taskapi.api.auth import get_current_user_id
from taskapi.core.database import get_db
from taskapi.core.errors import InternalFailure, NotFoundOrUnauthorized
from taskapi.models import Task
from taskapi.schemas.task import MessageResponse, TaskCreate, TaskResponse, TaskUpdate

logger = logging.getLogger(__name__)
router = APIRouter()


def _owned_task_query(db: Session, task_id: int, user_id: int):
    return db.query(Task).filter(Task.id == task_id, Task.user_id == user_id)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    body: TaskCreate,
    db: Annotated[Session, Depends(get_db)],
    user_id: Annotated[int, Depends(get_current_user_id)],
) -> TaskResponse:
    """Create a task owned by the caller and return it with its generated id."""
    task = Task(title=body.title, description=body.description, user_id=user_id)
    try:
        db.add(task)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to create task for user_id=%s: %s", user_id, e)
        raise InternalFailure("Failed to create task") from e
    return TaskResponse.model_validate(task)


@router.get("", response_model=list[TaskResponse])
def list_tasks(
    db: Annotated[Session, Depends(get_db)],
    user_id: Annotated[int, Depends(get_current_user_id)],
) -> list[TaskResponse]:
    """Return all of the caller's tasks in insertion order. No pagination."""
    try:
        tasks = db.query(Task).filter(Task.user_id == user_id).order_by(Task.id).all()
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch tasks for user_id=%s: %s", user_id, e)
        raise InternalFailure("Failed to fetch tasks") from e
    return [TaskResponse.model_validate(t) for t in tasks]


@router.put("/{task_id}", response_model=MessageResponse)
def update_task(
    task_id: int,
    body: TaskUpdate,
    db: Annotated[Session, Depends(get_db)],
    user_id: Annotated[int, Depends(get_current_user_id)],
) -> MessageResponse:
    """
    Update title and/or description of one of the caller's tasks.

    Returns 404 when no task matches both the id and the caller, whether the
    task is missing or belongs to someone else.
    """
    changes = body.changes()
    try:
        query = _owned_task_query(db, task_id, user_id)
        if changes:
            matched = query.update(changes, synchronize_session=False)
        else:
            matched = query.count()
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to update task_id=%s for user_id=%s: %s", task_id, user_id, e)
        raise InternalFailure("Failed to update task") from e

    if matched == 0:
        raise NotFoundOrUnauthorized()
    return MessageResponse(message="Task updated successfully")


@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(
    task_id: int,
    db: Annotated[Session, Depends(get_db)],
    user_id: Annotated[int, Depends(get_current_user_id)],
) -> MessageResponse:
    """Delete one of the caller's tasks; same 404 rule as update."""
    try:
        deleted = _owned_task_query(db, task_id, user_id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to delete task_id=%s for user_id=%s: %s", task_id, user_id, e)
        raise InternalFailure("Failed to delete task") from e

    if deleted == 0:
        raise NotFoundOrUnauthorized()
    return MessageResponse(message="Task deleted successfully")
