"""
Database Models (SQLAlchemy ORM)
Insert-only table - NO UPDATES, NO DELETES
"""

from sqlalchemy import Column, Integer, Numeric, Date, DateTime, Text, Enum as SQLEnum, Index, CheckConstraint
import enum

from spending_app.infrastructure.db.database import Base
from spending_app.utils.time import now_utc_naive


# Enums
class SpendingCategoryEnum(str, enum.Enum):
    BEER = "Beer"
    GYM = "Gym"


# Tables

class SpendingEntryModel(Base):
    """One recorded spending event"""
    __tablename__ = "spending_entry"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Date, nullable=False)
    category = Column(
        SQLEnum(
            SpendingCategoryEnum,
            name="spending_category",
            values_callable=lambda e: [member.value for member in e],
        ),
        nullable=False,
    )
    amount = Column(Numeric(12, 2), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_utc_naive)

    # Indexes
    __table_args__ = (
        Index("ix_spending_entry_date", "date"),
        Index("ix_spending_entry_category", "category"),
        CheckConstraint("amount > 0", name="ck_spending_entry_amount_positive"),
    )
