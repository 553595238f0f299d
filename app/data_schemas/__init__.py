from .confession import (
    Confession,
    ConfessionCreate,
    ErrorResponse,
    confession_to_row,
    row_to_confession,
)
from app.models import ConfessionRow

__all__ = [
    "Confession",
    "ConfessionCreate",
    "ErrorResponse",
    "ConfessionRow",
    "confession_to_row",
    "row_to_confession",
]
