"""initial pvz schema

Revision ID: p1a2b3c4d5e6
Revises:
Create Date: 2026-10-19 00:00:00.000000

Creates the pickup point schema from scratch:
- users: credentials and role
- pvz: pickup points
- receptions: goods-reception sessions, at most one in_progress per pvz
- products: items accepted during a reception
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'p1a2b3c4d5e6'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=16), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint("role IN ('employee', 'moderator')", name='ck_users_role'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'pvz',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('registration_date', sa.DateTime(), nullable=False),
        sa.Column('city', sa.String(length=64), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_pvz_registration_date', 'pvz', ['registration_date'])

    op.create_table(
        'receptions',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('date_time', sa.DateTime(), nullable=False),
        sa.Column('pvz_id', sa.String(length=36), nullable=False),
        sa.Column('status', sa.String(length=16), nullable=False),
        sa.ForeignKeyConstraint(['pvz_id'], ['pvz.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint("status IN ('in_progress', 'close')", name='ck_receptions_status'),
    )
    op.create_index('ix_receptions_pvz_id', 'receptions', ['pvz_id'])
    op.create_index('ix_receptions_date_time', 'receptions', ['date_time'])
    # One open reception per pickup point, enforced by the database
    op.create_index(
        'uq_receptions_one_open_per_pvz',
        'receptions',
        ['pvz_id'],
        unique=True,
        sqlite_where=sa.text("status = 'in_progress'"),
        postgresql_where=sa.text("status = 'in_progress'"),
    )

    # seq is the store-assigned insertion ordinal used to break date_time ties
    op.create_table(
        'products',
        sa.Column('seq', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('date_time', sa.DateTime(), nullable=False),
        sa.Column('type', sa.String(length=32), nullable=False),
        sa.Column('reception_id', sa.String(length=36), nullable=False),
        sa.ForeignKeyConstraint(['reception_id'], ['receptions.id'], ),
        sa.PrimaryKeyConstraint('seq'),
        sa.UniqueConstraint('id'),
    )
    op.create_index('ix_products_reception_id', 'products', ['reception_id'])


def downgrade():
    op.drop_index('ix_products_reception_id', table_name='products')
    op.drop_table('products')
    op.drop_index('uq_receptions_one_open_per_pvz', table_name='receptions')
    op.drop_index('ix_receptions_date_time', table_name='receptions')
    op.drop_index('ix_receptions_pvz_id', table_name='receptions')
    op.drop_table('receptions')
    op.drop_index('ix_pvz_registration_date', table_name='pvz')
    op.drop_table('pvz')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
