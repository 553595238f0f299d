# app/data_schemas/confession.py

from pydantic import BaseModel, Field
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional


class Confession(BaseModel):
    """A confession as the client sees it"""

    id: int
    message: str
    likes: int = Field(default=0, ge=0)
    created_at: str


class ConfessionCreate(BaseModel):
    """Request body for a new confession. The message is checked by the service."""

    message: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


def _timestamp(value: Any) -> str:
    if value is None:
        return datetime.now(timezone.utc).isoformat()
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def row_to_confession(row: Mapping[str, Any]) -> Confession:
    """Translate a backend row (confession/like) into the client record."""
    return Confession(
        id=row["id"],
        message=row["confession"],
        likes=row.get("like") or 0,
        created_at=_timestamp(row.get("created_at")),
    )


def confession_to_row(message: str, likes: int = 0) -> Dict[str, Any]:
    """Build the backend insert payload for a client message."""
    return {"confession": message, "like": likes}
