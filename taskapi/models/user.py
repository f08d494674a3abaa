"""ORM model for application users."""

from sqlalchemy import Column, Integer, String

from taskapi.models.base import Base


class User(Base):
    """User account identified by email; the password is stored only as a bcrypt hash."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
