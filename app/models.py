# app/models.py

from sqlmodel import SQLModel, Field
from datetime import datetime, timezone
from typing import Optional

CONFESSIONS_TABLE = "secret heart"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ConfessionRow(SQLModel, table=True):
    """A confession as stored in the backend table"""
    __tablename__ = CONFESSIONS_TABLE
    __table_args__ = {'extend_existing': True}

    id: Optional[int] = Field(default=None, primary_key=True)
    confession: str
    like: Optional[int] = Field(default=0)  # Legacy rows may hold NULL
    created_at: Optional[datetime] = Field(default_factory=utcnow)
