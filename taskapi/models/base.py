"""Declarative Base shared by the users and tasks tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
