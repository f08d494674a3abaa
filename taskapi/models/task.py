"""ORM model for user-owned tasks."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func

from taskapi.models.base import Base


class Task(Base):
    """
    A task item owned by exactly one user.

    Reads, updates and deletes always filter on (id, user_id) so a user never
    sees or touches another user's rows.
    """

    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
