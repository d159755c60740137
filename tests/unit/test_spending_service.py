"""
Unit Tests for SpendingService

Runs against an in-memory store so validation, ordering and
classification can be checked without a database.
"""

import pytest
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import List

from spending_app.domain.errors import StorageError, EntryValidationError
from spending_app.domain.models import (
    Category,
    PersonalityType,
    SpendingEntry,
    SpendingEntryDraft,
)
from spending_app.domain.services.spending_service import (
    MAX_AMOUNT,
    SpendingService,
    classify_personality,
    parse_amount,
    parse_category,
)


# Mock Repository for Testing
class MockEntryStore:
    """In-memory store, returns entries in insertion order"""

    def __init__(self):
        self.entries: List[SpendingEntry] = []
        self.insert_calls = 0

    async def insert(self, draft: SpendingEntryDraft) -> SpendingEntry:
        self.insert_calls += 1
        entry = SpendingEntry(
            id=len(self.entries) + 1,
            date=draft.date,
            category=draft.category,
            amount=draft.amount,
            description=draft.description,
            created_at=datetime(2026, 1, 1) + timedelta(seconds=len(self.entries)),
        )
        self.entries.append(entry)
        return entry

    async def list_all(self) -> List[SpendingEntry]:
        return list(self.entries)

    async def list_by_category(self, category: Category) -> List[SpendingEntry]:
        return [e for e in self.entries if e.category == category]

    async def total_for_category(self, category: Category) -> Decimal:
        return sum((e.amount for e in self.entries if e.category == category), Decimal("0"))


class FailingEntryStore(MockEntryStore):
    async def insert(self, draft: SpendingEntryDraft) -> SpendingEntry:
        self.insert_calls += 1
        raise StorageError("insert")


@pytest.fixture
def store():
    return MockEntryStore()


@pytest.fixture
def service(store):
    return SpendingService(store)


class TestCreateEntry:

    @pytest.mark.asyncio
    async def test_returns_stored_entry_with_identity(self, service):
        entry = await service.create_entry(date(2024, 1, 1), "Beer", 10.0, "Friday pint")

        assert entry.id == 1
        assert entry.created_at is not None
        assert entry.category == Category.BEER
        assert entry.amount == Decimal("10.0")
        assert entry.description == "Friday pint"

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, service):
        for i in range(5):
            await service.create_entry(date(2024, 1, i + 1), "Gym", 3)

        entries = await service.list_entries()
        assert len({e.id for e in entries}) == 5

    @pytest.mark.asyncio
    async def test_strips_time_from_datetime(self, service):
        entry = await service.create_entry(datetime(2024, 5, 3, 22, 45), "Gym", 20)
        assert entry.date == date(2024, 5, 3)
        assert not isinstance(entry.date, datetime)

    @pytest.mark.asyncio
    async def test_aware_datetime_uses_utc_day(self, service):
        plus_three = timezone(timedelta(hours=3))
        entry = await service.create_entry(datetime(2024, 5, 3, 1, 0, tzinfo=plus_three), "Gym", 20)
        assert entry.date == date(2024, 5, 2)

    @pytest.mark.asyncio
    async def test_accepts_iso_strings(self, service):
        first = await service.create_entry("2024-02-29", "Beer", "4.50")
        second = await service.create_entry("2024-02-29T23:10:00Z", "Beer", 4.5)
        assert first.date == second.date == date(2024, 2, 29)
        assert first.amount == second.amount == Decimal("4.50")

    @pytest.mark.asyncio
    async def test_null_description_differs_from_empty(self, service):
        absent = await service.create_entry(date(2024, 1, 1), "Beer", 1)
        empty = await service.create_entry(date(2024, 1, 1), "Beer", 1, "")
        assert absent.description is None
        assert empty.description == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", [0, -1, -0.01, "0", Decimal("-5")])
    async def test_rejects_non_positive_amount(self, service, store, amount):
        with pytest.raises(EntryValidationError) as exc:
            await service.create_entry(date(2024, 1, 1), "Beer", amount)
        assert exc.value.field == "amount"
        assert store.insert_calls == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", [0.001, "0.004", Decimal("0.0049"), -0.001])
    async def test_rejects_amount_that_rounds_to_zero(self, service, store, amount):
        with pytest.raises(EntryValidationError) as exc:
            await service.create_entry(date(2024, 1, 1), "Beer", amount)
        assert exc.value.field == "amount"
        assert store.insert_calls == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", ["10000000000.00", 1e11, Decimal("1e30"), "9999999999.995"])
    async def test_rejects_amount_too_large_for_column(self, service, store, amount):
        with pytest.raises(EntryValidationError) as exc:
            await service.create_entry(date(2024, 1, 1), "Gym", amount)
        assert exc.value.field == "amount"
        assert store.insert_calls == 0

    @pytest.mark.asyncio
    async def test_stores_amount_rounded_to_cents(self, service):
        entry = await service.create_entry(date(2024, 1, 1), "Beer", 0.005)
        assert entry.amount == Decimal("0.01")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", ["abc", None, True, float("nan"), float("inf"), [5]])
    async def test_rejects_non_numeric_amount(self, service, store, amount):
        with pytest.raises(EntryValidationError):
            await service.create_entry(date(2024, 1, 1), "Gym", amount)
        assert store.insert_calls == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("category", ["beer", "GYM", "Wine", "", None])
    async def test_rejects_unknown_category(self, service, store, category):
        with pytest.raises(EntryValidationError) as exc:
            await service.create_entry(date(2024, 1, 1), category, 5)
        assert exc.value.field == "category"
        assert store.insert_calls == 0

    @pytest.mark.asyncio
    async def test_rejects_bad_date(self, service, store):
        with pytest.raises(EntryValidationError) as exc:
            await service.create_entry("yesterday", "Beer", 5)
        assert exc.value.field == "date"
        assert store.insert_calls == 0

    @pytest.mark.asyncio
    async def test_storage_error_propagates_without_retry(self):
        failing = FailingEntryStore()
        service = SpendingService(failing)

        with pytest.raises(StorageError):
            await service.create_entry(date(2024, 1, 1), "Beer", 5)
        assert failing.insert_calls == 1


class TestListEntries:

    @pytest.mark.asyncio
    async def test_empty(self, service):
        assert await service.list_entries() == []

    @pytest.mark.asyncio
    async def test_most_recent_date_first(self, service):
        await service.create_entry(date(2024, 1, 1), "Beer", 5)
        await service.create_entry(date(2024, 3, 1), "Gym", 5)

        entries = await service.list_entries()
        assert entries[0].date == date(2024, 3, 1)
        assert entries[1].date == date(2024, 1, 1)

    @pytest.mark.asyncio
    async def test_backdated_entries_sorted_by_date_not_insertion(self, service):
        for d in [date(2024, 2, 1), date(2023, 12, 31), date(2024, 6, 15), date(2024, 2, 2)]:
            await service.create_entry(d, "Beer", 1)

        dates = [e.date for e in await service.list_entries()]
        assert dates == sorted(dates, reverse=True)

    @pytest.mark.asyncio
    async def test_same_date_newest_insert_first(self, service):
        first = await service.create_entry(date(2024, 4, 4), "Beer", 1)
        second = await service.create_entry(date(2024, 4, 4), "Gym", 2)

        entries = await service.list_entries()
        assert [e.id for e in entries] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_category_filter(self, service):
        await service.create_entry(date(2024, 1, 1), "Beer", 1)
        await service.create_entry(date(2024, 1, 2), "Gym", 2)
        await service.create_entry(date(2024, 1, 3), "Beer", 3)

        beers = await service.list_entries(category="Beer")
        assert [e.amount for e in beers] == [Decimal("3"), Decimal("1")]

        with pytest.raises(EntryValidationError):
            await service.list_entries(category="Wine")


class TestComputeSummary:

    @pytest.mark.asyncio
    async def test_no_entries_is_balanced(self, service):
        summary = await service.compute_summary()
        assert summary.beer_total == 0
        assert summary.gym_total == 0
        assert summary.total_spending == 0
        assert summary.personality_type == PersonalityType.BALANCED

    @pytest.mark.asyncio
    async def test_more_beer(self, service):
        await service.create_entry(date(2024, 1, 1), "Beer", 10.00)
        await service.create_entry(date(2024, 1, 2), "Gym", 5.00)

        summary = await service.compute_summary()
        assert summary.beer_total == Decimal("10")
        assert summary.gym_total == Decimal("5")
        assert summary.total_spending == Decimal("15")
        assert summary.personality_type == PersonalityType.ALCOHOLIC

    @pytest.mark.asyncio
    async def test_more_gym(self, service):
        await service.create_entry(date(2024, 1, 1), "Beer", 2)
        await service.create_entry(date(2024, 1, 2), "Gym", 2.01)

        summary = await service.compute_summary()
        assert summary.personality_type == PersonalityType.FITNESS_ENTHUSIAST

    @pytest.mark.asyncio
    async def test_equal_totals_are_balanced(self, service):
        await service.create_entry(date(2024, 1, 1), "Beer", 7.50)
        await service.create_entry(date(2024, 1, 2), "Gym", 7.50)

        summary = await service.compute_summary()
        assert summary.total_spending == Decimal("15")
        assert summary.personality_type == PersonalityType.BALANCED

    @pytest.mark.asyncio
    async def test_total_is_sum_and_reads_are_idempotent(self, service):
        for amount in [0.1, 0.2, 3.33]:
            await service.create_entry(date(2024, 1, 1), "Beer", amount)
        await service.create_entry(date(2024, 1, 1), "Gym", 1.11)

        first = await service.compute_summary()
        second = await service.compute_summary()
        assert first == second
        assert first.total_spending == first.beer_total + first.gym_total
        assert first.beer_total == Decimal("3.63")


class TestHelpers:

    def test_classify_tie_break(self):
        assert classify_personality(Decimal("1"), Decimal("0")) == PersonalityType.ALCOHOLIC
        assert classify_personality(Decimal("0"), Decimal("1")) == PersonalityType.FITNESS_ENTHUSIAST
        assert classify_personality(Decimal("0"), Decimal("0")) == PersonalityType.BALANCED

    def test_parse_category_accepts_enum(self):
        assert parse_category(Category.GYM) is Category.GYM
        assert parse_category("Beer") is Category.BEER

    def test_parse_amount_rounds_to_cents(self):
        assert parse_amount(7.5) == Decimal("7.50")
        assert parse_amount(" 12.30 ") == Decimal("12.30")
        assert parse_amount("2.345") == Decimal("2.35")
        assert parse_amount(0.005) == Decimal("0.01")
        assert parse_amount("9999999999.99") == MAX_AMOUNT
