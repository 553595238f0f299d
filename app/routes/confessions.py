# app/routes/confessions.py

from typing import List, Optional
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.store import ConfessionNotFound, ConfessionStore, StoreError, get_store
from app.data_schemas import Confession, ConfessionCreate, ErrorResponse
from app.services.confession_service import (
    ConfessionService,
    ConfessionValidationError,
)

router = APIRouter(prefix="/api/confessions", tags=["confessions"])

logger = logging.getLogger(__name__)

MESSAGE_REQUIRED = "Confession text is required"


def get_confession_service(
    store: ConfessionStore = Depends(get_store),
) -> ConfessionService:
    return ConfessionService(store)


def _error(status_code: int, error: str, details: Optional[str] = None) -> JSONResponse:
    content = {"error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Answer unusable create bodies with 400, other validation errors as usual"""
    if request.method == "POST" and request.url.path == router.prefix:
        return _error(400, MESSAGE_REQUIRED)
    return await request_validation_exception_handler(request, exc)


@router.get(
    "",
    response_model=List[Confession],
    responses={500: {"model": ErrorResponse}},
)
def list_confessions(service: ConfessionService = Depends(get_confession_service)):
    """Get all confessions, newest first"""
    try:
        return service.list_confessions()
    except StoreError as e:
        logger.error(f"Store error while listing confessions: {e}")
        return _error(500, "Failed to fetch confessions", str(e))


@router.post(
    "",
    response_model=Confession,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def create_confession(
    payload: Optional[ConfessionCreate] = None,
    service: ConfessionService = Depends(get_confession_service),
):
    """Store a new confession with no likes"""
    try:
        return service.create_confession(payload.message if payload else None)
    except ConfessionValidationError:
        return _error(400, MESSAGE_REQUIRED)
    except StoreError as e:
        logger.error(f"Store error while saving confession: {e}")
        return _error(500, "Failed to save confession", str(e))


@router.post(
    "/{confession_id}/like",
    response_model=Confession,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def like_confession(
    confession_id: int,
    service: ConfessionService = Depends(get_confession_service),
):
    """
    Add one like to a confession.

    Returns the updated confession in client shape (``likes``), like the
    other routes, rather than the raw table row (``like``).
    """
    try:
        return service.like_confession(confession_id)
    except ConfessionNotFound:
        return _error(404, "Confession not found")
    except StoreError as e:
        logger.error(f"Store error while liking confession {confession_id}: {e}")
        return _error(500, "Failed to like confession", str(e))
