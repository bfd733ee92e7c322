"""Create tenants and security_deposits tables

Revision ID: 20261018_000002
Revises: 20261018_000001
Create Date: 2026-10-18

property_id / property_type / building_id on tenants is the authoritative
tenant -> unit link; it has no foreign key because it points at one of
three tables.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261018_000002'
down_revision: Union[str, None] = '20261018_000001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the tenants and security_deposits tables."""
    op.create_table(
        'tenants',
        sa.Column('id', sa.String(64), nullable=False),
        # Personal info
        sa.Column('first_name', sa.String(100), nullable=False, server_default=''),
        sa.Column('last_name', sa.String(100), nullable=False, server_default=''),
        sa.Column('full_name', sa.String(255), nullable=False),
        sa.Column('date_of_birth', sa.Date(), nullable=True),
        sa.Column('occupation', sa.String(100), nullable=False),
        sa.Column('employer', sa.String(255), nullable=True),
        sa.Column('monthly_income', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('marital_status', sa.String(20), nullable=False, server_default='single'),
        sa.Column('family_size', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('nationality', sa.String(50), nullable=False),
        sa.Column('religion', sa.String(50), nullable=True),
        # Contact info
        sa.Column('phone', sa.String(20), nullable=False),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        # Emergency contact
        sa.Column('emergency_contact_name', sa.String(255), nullable=True),
        sa.Column('emergency_contact_relationship', sa.String(100), nullable=True),
        sa.Column('emergency_contact_phone', sa.String(20), nullable=True),
        sa.Column('emergency_contact_email', sa.String(255), nullable=True),
        sa.Column('emergency_contact_address', sa.Text(), nullable=True),
        # Identification
        sa.Column('aadhar_number', sa.String(12), nullable=True),
        sa.Column('pan_number', sa.String(10), nullable=True),
        sa.Column('driving_license', sa.String(20), nullable=True),
        sa.Column('passport', sa.String(20), nullable=True),
        sa.Column('voter_id_number', sa.String(20), nullable=True),
        # Rental agreement
        sa.Column('agreement_number', sa.String(50), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('rent_amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('security_deposit', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('maintenance_charges', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('rent_due_day', sa.Integer(), nullable=False),
        sa.Column('payment_method', sa.String(20), nullable=False, server_default='bank_transfer'),
        sa.Column('late_fee_amount', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('notice_period', sa.Integer(), nullable=False, server_default='30'),
        sa.Column('renewal_terms', sa.Text(), nullable=True),
        sa.Column('special_conditions', sa.JSON(), nullable=False),
        sa.Column('references', sa.JSON(), nullable=False),
        sa.Column('documents', sa.JSON(), nullable=False),
        # Property assignment
        sa.Column('property_id', sa.String(64), nullable=True),
        sa.Column('property_type', sa.String(20), nullable=True),
        sa.Column('building_id', sa.String(64), nullable=True),
        # Status
        sa.Column('move_in_date', sa.Date(), nullable=False),
        sa.Column('move_out_date', sa.Date(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_tenants_property_id', 'tenants', ['property_id'])
    op.create_index('ix_tenants_building_id', 'tenants', ['building_id'])
    op.create_index('ix_tenants_property_lookup', 'tenants', ['property_id', 'property_type', 'is_active'])

    op.create_table(
        'security_deposits',
        sa.Column('id', sa.String(64), nullable=False),
        sa.Column('tenant_id', sa.String(64), nullable=False),
        sa.Column('property_id', sa.String(64), nullable=False),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('paid_date', sa.Date(), nullable=False),
        sa.Column('refund_date', sa.Date(), nullable=True),
        sa.Column('refund_amount', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('deductions', sa.JSON(), nullable=False),
        sa.Column(
            'status',
            sa.Enum('HELD', 'REFUNDED', 'FORFEITED', name='deposit_status'),
            nullable=False,
            server_default='HELD'
        ),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_security_deposits_tenant_id', 'security_deposits', ['tenant_id'])


def downgrade() -> None:
    """Drop the tenants and security_deposits tables."""
    op.drop_index('ix_security_deposits_tenant_id', table_name='security_deposits')
    op.drop_table('security_deposits')
    op.drop_index('ix_tenants_property_lookup', table_name='tenants')
    op.drop_index('ix_tenants_building_id', table_name='tenants')
    op.drop_index('ix_tenants_property_id', table_name='tenants')
    op.drop_table('tenants')
