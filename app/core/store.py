"""
Access to the confessions table.

Rows are handed out in the table's native shape (``confession``/``like``);
translating them for clients is the job of ``app.data_schemas.confession``.
"""

from __future__ import annotations

import threading
from typing import Any, Dict, List, Protocol

from fastapi import Request
from sqlalchemy import func, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.models import ConfessionRow, utcnow

Row = Dict[str, Any]


class StoreError(Exception):
    """Raised when the backend table cannot be read or written."""


class ConfessionNotFound(StoreError):
    """Raised when no row carries the requested id."""

    def __init__(self, confession_id: int):
        super().__init__(f"Confession {confession_id} does not exist")
        self.confession_id = confession_id


class ConfessionStore(Protocol):
    """Interface for the confessions table."""

    def list_rows(self, newest_first: bool = True) -> List[Row]:
        ...

    def insert_row(self, values: Row) -> List[Row]:
        ...

    def increment_like(self, confession_id: int) -> Row:
        ...

    def close(self) -> None:
        ...


class SQLConfessionStore:
    """Store backed by a SQLModel engine (Postgres in production, SQLite locally)."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def list_rows(self, newest_first: bool = True) -> List[Row]:
        statement = select(ConfessionRow)
        if newest_first:
            statement = statement.order_by(ConfessionRow.id.desc())
        try:
            with Session(self.engine) as session:
                return [row.model_dump() for row in session.exec(statement).all()]
        except SQLAlchemyError as e:
            raise StoreError(str(e)) from e

    def insert_row(self, values: Row) -> List[Row]:
        try:
            with Session(self.engine) as session:
                row = ConfessionRow(**values)
                session.add(row)
                session.commit()
                session.refresh(row)
                return [row.model_dump()]
        except SQLAlchemyError as e:
            raise StoreError(str(e)) from e

    def increment_like(self, confession_id: int) -> Row:
        """Add one like in a single UPDATE and return the row as committed."""
        statement = (
            update(ConfessionRow)
            .where(ConfessionRow.id == confession_id)
            .values(like=func.coalesce(ConfessionRow.like, 0) + 1)
            .execution_options(synchronize_session=False)
        )
        try:
            with Session(self.engine) as session:
                result = session.exec(statement)
                if result.rowcount == 0:
                    session.rollback()
                    raise ConfessionNotFound(confession_id)
                row = session.get(ConfessionRow, confession_id)
                updated = row.model_dump()
                session.commit()
                return updated
        except SQLAlchemyError as e:
            raise StoreError(str(e)) from e

    def close(self) -> None:
        self.engine.dispose()


class InMemoryConfessionStore:
    """Dict-backed store for development and tests."""

    def __init__(self):
        self.rows: Dict[int, Row] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def list_rows(self, newest_first: bool = True) -> List[Row]:
        with self._lock:
            rows = [dict(row) for row in self.rows.values()]
        if newest_first:
            rows.sort(key=lambda row: row["id"], reverse=True)
        return rows

    def insert_row(self, values: Row) -> List[Row]:
        with self._lock:
            row = {"like": 0, "created_at": utcnow(), **values, "id": self._next_id}
            self.rows[row["id"]] = row
            self._next_id += 1
            return [dict(row)]

    def increment_like(self, confession_id: int) -> Row:
        with self._lock:
            row = self.rows.get(confession_id)
            if row is None:
                raise ConfessionNotFound(confession_id)
            row["like"] = (row.get("like") or 0) + 1
            return dict(row)

    def reset(self) -> None:
        """Clear all stored rows (useful in tests)."""
        with self._lock:
            self.rows.clear()
            self._next_id = 1

    def close(self) -> None:
        pass


def get_store(request: Request) -> ConfessionStore:
    """Get the confession store from app state"""
    return request.app.state.store
