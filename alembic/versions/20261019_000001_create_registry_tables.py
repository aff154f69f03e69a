"""Create property registry tables

Revision ID: 20261019_000001
Revises: None
Create Date: 2026-10-19

This migration creates the property_types reference table (with its seed
rows) and the owners, companies and properties tables.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261019_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


PROPERTY_TYPES = [
    (1, 'residential'),
    (2, 'commercial'),
    (3, 'industrial'),
    (4, 'raw land'),
    (5, 'special purpose'),
]


def upgrade() -> None:
    """Create the registry tables and seed property types."""
    property_types = op.create_table(
        'property_types',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('type', sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'owners',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=200), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=False),
        sa.Column('address', sa.String(length=500), nullable=False),
        sa.Column('description', sa.String(length=1000), nullable=False),
        sa.Column('is_company_contact', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'companies',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('owner_id', sa.Integer(), nullable=False),
        sa.Column('company_name', sa.String(length=200), nullable=False),
        sa.Column('company_site', sa.String(length=500), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['owner_id'],
            ['owners.id'],
            name='fk_companies_owner_id',
            ondelete='RESTRICT'
        ),
    )
    op.create_index('ix_companies_owner_id', 'companies', ['owner_id'])

    op.create_table(
        'properties',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('owner_id', sa.Integer(), nullable=False),
        sa.Column('property_type_id', sa.Integer(), nullable=False),
        sa.Column('property_length', sa.Numeric(precision=18, scale=2), nullable=False),
        sa.Column('property_cost', sa.Numeric(precision=18, scale=2), nullable=False),
        sa.Column('date_of_building', sa.DateTime(timezone=True), nullable=False),
        sa.Column('description', sa.String(length=1000), nullable=False),
        sa.Column('country', sa.String(length=100), nullable=False),
        sa.Column('city', sa.String(length=100), nullable=False),
        sa.Column('street', sa.String(length=200), nullable=False),
        sa.Column('zip_code', sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['owner_id'],
            ['owners.id'],
            name='fk_properties_owner_id',
            ondelete='RESTRICT'
        ),
        sa.ForeignKeyConstraint(
            ['property_type_id'],
            ['property_types.id'],
            name='fk_properties_property_type_id',
            ondelete='RESTRICT'
        ),
    )
    op.create_index('ix_properties_owner_id', 'properties', ['owner_id'])
    op.create_index('ix_properties_property_type_id', 'properties', ['property_type_id'])

    op.bulk_insert(
        property_types,
        [{'id': type_id, 'type': label} for type_id, label in PROPERTY_TYPES],
    )


def downgrade() -> None:
    """Drop the registry tables."""
    op.drop_index('ix_properties_property_type_id', table_name='properties')
    op.drop_index('ix_properties_owner_id', table_name='properties')
    op.drop_table('properties')
    op.drop_index('ix_companies_owner_id', table_name='companies')
    op.drop_table('companies')
    op.drop_table('owners')
    op.drop_table('property_types')
