"""
Domain Models Package
Export all domain entities
"""

from .entities import (
    # Enums
    Category,
    PersonalityType,

    # Entities
    SpendingEntry,
    SpendingEntryDraft,
    SpendingSummary,
)

__all__ = [
    # Enums
    "Category",
    "PersonalityType",

    # Entities
    "SpendingEntry",
    "SpendingEntryDraft",
    "SpendingSummary",
]
