"""
Spending API Routes
Record Beer/Gym expenses, list them, and summarize them
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import logging

from spending_app.domain.errors import StorageError, EntryValidationError
from spending_app.domain.models import Category
from spending_app.domain.schemas.spending import (
    CreateSpendingEntryRequest,
    SpendingEntryResponse,
    SpendingSummaryResponse,
)
from spending_app.domain.services.spending_service import SpendingService
from spending_app.infrastructure.db.database import get_db
from spending_app.infrastructure.db.repositories.spending_entry_repository import (
    SpendingEntryRepository,
)
from spending_app.presentation.formatters import format_dashboard

logger = logging.getLogger(__name__)
router = APIRouter()


def get_spending_service(db: AsyncSession = Depends(get_db)) -> SpendingService:
    return SpendingService(SpendingEntryRepository(db))


def _storage_unavailable(e: StorageError) -> HTTPException:
    logger.error(f"❌ Storage error: {e}")
    return HTTPException(status_code=503, detail=f"Storage unavailable ({e})")


# ------------------------------------------------------------------
# Routes
# ------------------------------------------------------------------

@router.post("/entries", response_model=SpendingEntryResponse, status_code=201)
async def create_spending_entry(
    request: CreateSpendingEntryRequest,
    service: SpendingService = Depends(get_spending_service),
):
    """
    Record one spending entry.

    The date is stored as a calendar day; id and created_at are assigned
    by the server.
    """
    try:
        entry = await service.create_entry(
            date=request.date,
            category=request.category,
            amount=request.amount,
            description=request.description,
        )
    except EntryValidationError as e:
        logger.warning(f"Rejected spending entry: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise _storage_unavailable(e)

    return SpendingEntryResponse.from_entity(entry)


@router.get("/entries", response_model=List[SpendingEntryResponse])
async def get_spending_entries(
    category: Optional[Category] = Query(None, description="Only this category"),
    service: SpendingService = Depends(get_spending_service),
):
    """All entries, most recent expense date first."""
    try:
        entries = await service.list_entries(category=category)
    except StorageError as e:
        raise _storage_unavailable(e)

    return [SpendingEntryResponse.from_entity(e) for e in entries]


@router.get("/summary", response_model=SpendingSummaryResponse)
async def get_spending_summary(
    service: SpendingService = Depends(get_spending_service),
):
    """Beer total, Gym total, overall total and personality type."""
    try:
        summary = await service.compute_summary()
    except StorageError as e:
        raise _storage_unavailable(e)

    return SpendingSummaryResponse.from_summary(summary)


@router.get("/dashboard", response_class=PlainTextResponse)
async def get_spending_dashboard(
    service: SpendingService = Depends(get_spending_service),
):
    """Plain-text dashboard: summary followed by the entry list."""
    try:
        summary = await service.compute_summary()
        entries = await service.list_entries()
    except StorageError as e:
        raise _storage_unavailable(e)

    return format_dashboard(summary, entries)
