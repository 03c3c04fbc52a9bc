"""
SQLAlchemy ORM models.
"""

from __future__ import annotations

from typing import Any, Dict

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "username": self.username, "password": self.password}
