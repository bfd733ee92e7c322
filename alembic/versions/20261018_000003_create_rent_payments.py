"""Create rent_payments table

Revision ID: 20261018_000003
Revises: 20261018_000002
Create Date: 2026-10-18

One row per month of rent owed by a tenant. Like security_deposits it
keys on tenant_id without a foreign key; rows are removed with the tenant.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261018_000003'
down_revision: Union[str, None] = '20261018_000002'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the rent_payments table."""
    op.create_table(
        'rent_payments',
        sa.Column('id', sa.String(64), nullable=False),
        sa.Column('tenant_id', sa.String(64), nullable=False),
        sa.Column('property_id', sa.String(64), nullable=False),
        sa.Column('property_type', sa.String(20), nullable=False),
        sa.Column('building_id', sa.String(64), nullable=True),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('late_fee', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('discount', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('actual_amount_paid', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('due_date', sa.Date(), nullable=False),
        sa.Column('paid_date', sa.Date(), nullable=True),
        sa.Column(
            'status',
            sa.Enum('PENDING', 'PAID', 'OVERDUE', 'PARTIAL', name='rent_payment_status'),
            nullable=False,
            server_default='PENDING'
        ),
        sa.Column('payment_method', sa.String(20), nullable=False, server_default='bank_transfer'),
        sa.Column('transaction_id', sa.String(100), nullable=True),
        sa.Column('receipt_number', sa.String(50), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_rent_payments_tenant_id', 'rent_payments', ['tenant_id'])
    op.create_index('ix_rent_payments_due_date', 'rent_payments', ['due_date'])
    op.create_index('ix_rent_payments_status', 'rent_payments', ['status'])
    op.create_index('ix_rent_payments_tenant_due', 'rent_payments', ['tenant_id', 'due_date'])


def downgrade() -> None:
    """Drop the rent_payments table."""
    op.drop_index('ix_rent_payments_tenant_due', table_name='rent_payments')
    op.drop_index('ix_rent_payments_status', table_name='rent_payments')
    op.drop_index('ix_rent_payments_due_date', table_name='rent_payments')
    op.drop_index('ix_rent_payments_tenant_id', table_name='rent_payments')
    op.drop_table('rent_payments')
