# app/services/confession_service.py

import logging
from typing import List

from app.core.store import ConfessionStore, StoreError
from app.data_schemas import Confession, confession_to_row, row_to_confession

logger = logging.getLogger(__name__)


class ConfessionValidationError(ValueError):
    """Raised when a submitted confession has no text."""


class ConfessionService:
    def __init__(self, store: ConfessionStore):
        self.store = store

    def list_confessions(self) -> List[Confession]:
        """Return every confession, newest first when the backend can order them."""
        try:
            rows = self.store.list_rows(newest_first=True)
        except StoreError as e:
            # Order is best effort; a second failure is fatal
            logger.warning(f"Ordering by id failed, trying without order: {e}")
            rows = self.store.list_rows(newest_first=False)
        return [row_to_confession(row) for row in rows]

    def create_confession(self, message) -> Confession:
        if not message:
            raise ConfessionValidationError("Confession text is required")
        if not isinstance(message, str):
            raise ConfessionValidationError("Confession text must be a string")

        rows = self.store.insert_row(confession_to_row(message))
        if not rows:
            raise StoreError("No data returned after insert")

        confession = row_to_confession(rows[0])
        logger.info(f"Stored confession {confession.id}")
        return confession

    def like_confession(self, confession_id: int) -> Confession:
        row = self.store.increment_like(confession_id)
        return row_to_confession(row)
