"""
Spending Entry Repository
Insert/read operations for spending entries (no updates, no deletes)
"""

import logging
from decimal import Decimal
from typing import List

from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from spending_app.domain.errors import StorageError
from spending_app.domain.models import Category, SpendingEntry, SpendingEntryDraft
from spending_app.infrastructure.db.models import SpendingCategoryEnum, SpendingEntryModel

logger = logging.getLogger(__name__)


def _to_entity(model: SpendingEntryModel) -> SpendingEntry:
    return SpendingEntry(
        id=model.id,
        date=model.date,
        category=Category(SpendingCategoryEnum(model.category).value),
        amount=Decimal(str(model.amount)),
        description=model.description,
        created_at=model.created_at,
    )


class SpendingEntryRepository:
    """Repository for spending entries"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def insert(self, draft: SpendingEntryDraft) -> SpendingEntry:
        """
        Persist a draft as one row and commit it.
        id and created_at are assigned here.
        """
        record = SpendingEntryModel(
            date=draft.date,
            category=SpendingCategoryEnum(draft.category.value),
            amount=draft.amount,
            description=draft.description,
        )
        try:
            self.session.add(record)
            await self.session.commit()
            await self.session.refresh(record)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Spending entry insert failed: {e}")
            raise StorageError("insert", e) from e

        return _to_entity(record)

    async def list_all(self) -> List[SpendingEntry]:
        return await self._fetch(
            select(SpendingEntryModel).order_by(SpendingEntryModel.id),
            "list_all",
        )

    async def list_by_category(self, category: Category) -> List[SpendingEntry]:
        return await self._fetch(
            select(SpendingEntryModel)
            .where(SpendingEntryModel.category == SpendingCategoryEnum(category.value))
            .order_by(SpendingEntryModel.id),
            "list_by_category",
        )

    async def total_for_category(self, category: Category) -> Decimal:
        """
        Sum of amounts for one category, 0 when it has no entries.
        """
        try:
            result = await self.session.execute(
                select(func.coalesce(func.sum(SpendingEntryModel.amount), 0))
                .where(SpendingEntryModel.category == SpendingCategoryEnum(category.value))
            )
            total = result.scalar()
        except SQLAlchemyError as e:
            logger.error(f"Spending total for {category.value} failed: {e}")
            raise StorageError("total_for_category", e) from e

        return Decimal(str(total)) if total else Decimal("0")

    async def _fetch(self, stmt, operation: str) -> List[SpendingEntry]:
        try:
            result = await self.session.execute(stmt)
            models = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"Spending {operation} failed: {e}")
            raise StorageError(operation, e) from e

        return [_to_entity(m) for m in models]
