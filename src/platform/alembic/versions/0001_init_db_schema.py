"""init_db_schema

Revision ID: 0001
Revises:
Create Date: 2024-05-01

Schema:
- sales_managers: sellers with language, product and customer rating tags
- slots: one-hour calendar slots per sales manager, booked or free
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ARRAY


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'sales_managers',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=250), nullable=False),
        sa.Column('languages', ARRAY(sa.String(length=100)), nullable=True),
        sa.Column('products', ARRAY(sa.String(length=100)), nullable=True),
        sa.Column('customer_ratings', ARRAY(sa.String(length=100)), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'slots',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('start_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('booked', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('sales_manager_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ['sales_manager_id'], ['sales_managers.id'], ondelete='CASCADE'
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_slots_start_date'), 'slots', ['start_date'], unique=False)
    op.create_index(
        op.f('ix_slots_sales_manager_id'), 'slots', ['sales_manager_id'], unique=False
    )


def downgrade() -> None:
    op.drop_index(op.f('ix_slots_sales_manager_id'), table_name='slots')
    op.drop_index(op.f('ix_slots_start_date'), table_name='slots')
    op.drop_table('slots')
    op.drop_table('sales_managers')
