"""
SPENDING SERVICE
Create, list and summarize Beer/Gym spending entries

RESPONSIBILITIES:
- Validate and normalize drafts before they reach the store
- Order entries for display (date desc, newest insert first on ties)
- Compute per-category totals and the personality label

RULES:
- Nothing is written unless validation passed
- Storage errors propagate unchanged (no retry)
- Summary is recomputed on every call
"""

import logging
import math
from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from numbers import Number
from typing import List, Optional, Protocol

from spending_app.domain.errors import EntryValidationError
from spending_app.domain.models import (
    Category,
    PersonalityType,
    SpendingEntry,
    SpendingEntryDraft,
    SpendingSummary,
)
from spending_app.utils.time import to_calendar_date

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
MAX_AMOUNT = Decimal("9999999999.99")


class EntryStore(Protocol):
    """Protocol for spending entry data access - ASYNC"""

    async def insert(self, draft: SpendingEntryDraft) -> SpendingEntry:
        """Persist a draft, assigning id and created_at"""
        ...

    async def list_all(self) -> List[SpendingEntry]:
        """Every persisted entry, in no particular order"""
        ...

    async def list_by_category(self, category: Category) -> List[SpendingEntry]:
        """Entries of one category, in no particular order"""
        ...

    async def total_for_category(self, category: Category) -> Decimal:
        """Sum of amounts for one category (0 if none)"""
        ...


def parse_category(value) -> Category:
    """Accept a Category member or its exact string value."""
    if isinstance(value, Category):
        return value
    if isinstance(value, str):
        for category in Category:
            if category.value == value:
                return category
    raise EntryValidationError("category", f"must be one of {[c.value for c in Category]}, got {value!r}")


def parse_amount(value) -> Decimal:
    """Positive, finite number as Decimal, rounded half-up to cents."""
    if isinstance(value, bool) or not isinstance(value, (Number, str)):
        raise EntryValidationError("amount", f"must be a number, got {value!r}")

    if isinstance(value, float) and not math.isfinite(value):
        raise EntryValidationError("amount", "must be finite")

    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation:
        raise EntryValidationError("amount", f"must be a number, got {value!r}")

    if not amount.is_finite():
        raise EntryValidationError("amount", "must be finite")

    # Stored as NUMERIC(12, 2): check the value that will actually be written
    if amount > 0 and amount <= MAX_AMOUNT + CENT:
        amount = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    if amount <= 0:
        raise EntryValidationError("amount", f"must be at least {CENT}, got {value!r}")
    if amount > MAX_AMOUNT:
        raise EntryValidationError("amount", f"must not exceed {MAX_AMOUNT}, got {value!r}")
    return amount


def parse_date(value) -> date:
    try:
        return to_calendar_date(value)
    except ValueError as e:
        raise EntryValidationError("date", str(e)) from e


def classify_personality(beer_total: Decimal, gym_total: Decimal) -> PersonalityType:
    if beer_total > gym_total:
        return PersonalityType.ALCOHOLIC
    elif gym_total > beer_total:
        return PersonalityType.FITNESS_ENTHUSIAST
    else:
        return PersonalityType.BALANCED


def sort_newest_first(entries: List[SpendingEntry]) -> List[SpendingEntry]:
    """Date descending; same-date entries by id descending."""
    return sorted(entries, key=lambda e: (e.date, e.id), reverse=True)


class SpendingService:
    """
    Handlers behind createSpendingEntry, getSpendingEntries and
    getSpendingSummary. Stateless apart from the injected store.
    """

    def __init__(self, store: EntryStore):
        self.store = store

    async def create_entry(
        self,
        date,
        category,
        amount,
        description: Optional[str] = None,
    ) -> SpendingEntry:
        """
        Validate, normalize and persist one entry.

        Raises:
            EntryValidationError: bad amount, category, date or description
            StorageError: the insert failed
        """
        if description is not None and not isinstance(description, str):
            raise EntryValidationError("description", "must be a string or null")

        draft = SpendingEntryDraft(
            date=parse_date(date),
            category=parse_category(category),
            amount=parse_amount(amount),
            description=description,
        )

        entry = await self.store.insert(draft)
        logger.info(
            f"Recorded {entry.category.value} entry #{entry.id}: "
            f"{entry.amount} on {entry.date.isoformat()}"
        )
        return entry

    async def list_entries(self, category=None) -> List[SpendingEntry]:
        """All entries (optionally one category), most recent date first."""
        if category is None:
            entries = await self.store.list_all()
        else:
            entries = await self.store.list_by_category(parse_category(category))
        return sort_newest_first(entries)

    async def compute_summary(self) -> SpendingSummary:
        beer_total = Decimal(await self.store.total_for_category(Category.BEER))
        gym_total = Decimal(await self.store.total_for_category(Category.GYM))

        return SpendingSummary(
            beer_total=beer_total,
            gym_total=gym_total,
            total_spending=beer_total + gym_total,
            personality_type=classify_personality(beer_total, gym_total),
        )
