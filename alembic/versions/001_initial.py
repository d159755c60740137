# alembic/versions/001_initial.py

"""Initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # Create spending_entry table - insert-only
    op.create_table('spending_entry',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('category', sa.Enum('Beer', 'Gym', name='spending_category'), nullable=False),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint('amount > 0', name='ck_spending_entry_amount_positive'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_spending_entry_date', 'spending_entry', ['date'])
    op.create_index('ix_spending_entry_category', 'spending_entry', ['category'])


def downgrade():
    op.drop_index('ix_spending_entry_category', table_name='spending_entry')
    op.drop_index('ix_spending_entry_date', table_name='spending_entry')
    op.drop_table('spending_entry')
    sa.Enum(name='spending_category').drop(op.get_bind(), checkfirst=True)
