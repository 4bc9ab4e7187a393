"""Create breeding ledger tables

Revision ID: 3f1c9a7d2e10
Revises:
Create Date: 2026-10-19 00:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7d2e10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'ledger_config_state',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('owner', sa.String(length=255), nullable=False),
        sa.Column('breed_count_limit', sa.BigInteger(), nullable=False),
        sa.Column('breed_duration', sa.BigInteger(), nullable=False),
        sa.Column('breed_price_amount', sa.String(length=40), nullable=False),
        sa.Column('breed_price_denom', sa.String(length=64), nullable=False),
        sa.Column('breed_start_time', sa.BigInteger(), nullable=True),
        sa.Column('child_base_uri', sa.Text(), nullable=True),
        sa.Column('child_contract_addr', sa.String(length=255), nullable=True),
        sa.Column('child_nft_max_supply', sa.BigInteger(), nullable=True),
        sa.Column('parent_contract_addr', sa.String(length=255), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_ledger_config_state'),
    )
    op.create_table(
        'breed_counter',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('count', sa.BigInteger(), nullable=False),
        sa.Column('latest_id', sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_breed_counter'),
    )
    op.create_table(
        'breedings',
        sa.Column('id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('owner', sa.String(length=255), nullable=False),
        sa.Column('parent_a', sa.String(length=255), nullable=False),
        sa.Column('parent_b', sa.String(length=255), nullable=False),
        sa.Column('start_time', sa.BigInteger(), nullable=False),
        sa.Column('end_time', sa.BigInteger(), nullable=False),
        sa.Column('withdrawn', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_breedings'),
    )
    op.create_index('ix_breedings_owner', 'breedings', ['owner'])
    op.create_index('ix_breedings_withdrawn', 'breedings', ['withdrawn'])
    op.create_table(
        'fee_balance',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('amount', sa.String(length=40), nullable=False),
        sa.Column('denom', sa.String(length=64), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_fee_balance'),
    )


def downgrade() -> None:
    op.drop_table('fee_balance')
    op.drop_index('ix_breedings_withdrawn', table_name='breedings')
    op.drop_index('ix_breedings_owner', table_name='breedings')
    op.drop_table('breedings')
    op.drop_table('breed_counter')
    op.drop_table('ledger_config_state')
