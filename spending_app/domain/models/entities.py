"""
Domain Models - Entities
Pure domain objects with no infrastructure dependencies
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class Category(str, Enum):
    """Fixed spending category"""
    BEER = "Beer"
    GYM = "Gym"


class PersonalityType(str, Enum):
    """Label derived from comparing Beer vs Gym totals"""
    ALCOHOLIC = "more an alcoholic"
    FITNESS_ENTHUSIAST = "more a fitness enthusiast"
    BALANCED = "balanced"


@dataclass(frozen=True)
class SpendingEntryDraft:
    """
    Validated entry that has not been persisted yet.
    The store assigns id and created_at.
    """
    date: date
    category: Category
    amount: Decimal
    description: Optional[str] = None


@dataclass(frozen=True)
class SpendingEntry:
    """
    Persisted spending entry - never updated or deleted.

    date is the user-chosen calendar day of the expense; created_at is the
    server instant of insertion. The two are independent.
    """
    id: int
    date: date
    category: Category
    amount: Decimal
    description: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class SpendingSummary:
    """
    Aggregate over all entries. Computed on every request, never stored.
    """
    beer_total: Decimal
    gym_total: Decimal
    total_spending: Decimal
    personality_type: PersonalityType
