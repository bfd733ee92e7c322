"""Create property tables

Revision ID: 20261018_000001
Revises: None
Create Date: 2026-10-18

Creates buildings, apartments, flats and lands. Apartments and flats carry
is_occupied, lands carry is_leased; each has a current_tenant_id
back-reference (no foreign key, tenants point at units, not the reverse).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261018_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    """Create the property tables."""
    op.create_table(
        'buildings',
        sa.Column('id', sa.String(64), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('building_code', sa.String(10), nullable=False),
        sa.Column('address', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('total_floors', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('total_apartments', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('construction_year', sa.Integer(), nullable=True),
        sa.Column('amenities', sa.JSON(), nullable=False),
        sa.Column('images', sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'apartments',
        sa.Column('id', sa.String(64), nullable=False),
        sa.Column('building_id', sa.String(64), nullable=False),
        sa.Column('door_number', sa.String(20), nullable=False),
        sa.Column('service_number', sa.String(50), nullable=True),
        sa.Column('floor', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('bedroom_count', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('bathroom_count', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('area', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('rent_amount', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('security_deposit', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('is_occupied', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('current_tenant_id', sa.String(64), nullable=True),
        sa.Column('furnished', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('parking', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('balcony', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('air_conditioning', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('power_backup', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('water_supply', sa.String(20), nullable=False, server_default='limited'),
        sa.Column('internet_ready', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('additional_features', sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['building_id'],
            ['buildings.id'],
            name='fk_apartments_building_id',
            ondelete='CASCADE'
        ),
    )
    op.create_index('ix_apartments_building_id', 'apartments', ['building_id'])
    op.create_index('ix_apartments_current_tenant_id', 'apartments', ['current_tenant_id'])

    op.create_table(
        'flats',
        sa.Column('id', sa.String(64), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('door_number', sa.String(20), nullable=False),
        sa.Column('service_number', sa.String(50), nullable=True),
        sa.Column('address', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('bedroom_count', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('bathroom_count', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('area', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('floor', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('total_floors', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('rent_amount', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('security_deposit', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('is_occupied', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('current_tenant_id', sa.String(64), nullable=True),
        sa.Column('furnished', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('parking', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('balcony', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('air_conditioning', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('power_backup', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('water_supply', sa.String(20), nullable=False, server_default='limited'),
        sa.Column('internet_ready', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('society_name', sa.String(255), nullable=True),
        sa.Column('maintenance_charges', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('additional_features', sa.JSON(), nullable=False),
        sa.Column('images', sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_flats_current_tenant_id', 'flats', ['current_tenant_id'])

    op.create_table(
        'lands',
        sa.Column('id', sa.String(64), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('address', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('survey_number', sa.String(50), nullable=True),
        sa.Column('area', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('area_unit', sa.String(10), nullable=False, server_default='sqft'),
        sa.Column('zoning', sa.String(20), nullable=False, server_default='residential'),
        sa.Column('soil_type', sa.String(100), nullable=True),
        sa.Column('water_source', sa.String(100), nullable=True),
        sa.Column('road_access', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('electricity_connection', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('is_leased', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('current_tenant_id', sa.String(64), nullable=True),
        sa.Column('lease_type', sa.String(20), nullable=True),
        sa.Column('rent_amount', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('rent_frequency', sa.String(20), nullable=True),
        sa.Column('lease_security_deposit', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('lease_duration', sa.Integer(), nullable=True),
        sa.Column('renewal_terms', sa.Text(), nullable=True),
        sa.Column('restrictions', sa.JSON(), nullable=False),
        sa.Column('images', sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_lands_current_tenant_id', 'lands', ['current_tenant_id'])


def downgrade() -> None:
    """Drop the property tables."""
    op.drop_index('ix_lands_current_tenant_id', table_name='lands')
    op.drop_table('lands')
    op.drop_index('ix_flats_current_tenant_id', table_name='flats')
    op.drop_table('flats')
    op.drop_index('ix_apartments_current_tenant_id', table_name='apartments')
    op.drop_index('ix_apartments_building_id', table_name='apartments')
    op.drop_table('apartments')
    op.drop_table('buildings')
