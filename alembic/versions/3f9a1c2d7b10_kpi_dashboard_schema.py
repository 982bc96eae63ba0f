"""kpi dashboard schema

Revision ID: 3f9a1c2d7b10
Revises: 
Create Date: 2025-08-25 15:12:02.114530

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9a1c2d7b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'admin_users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(), nullable=False, unique=True),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_admin_users_email', 'admin_users', ['email'])

    op.create_table(
        'members',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False, unique=True),
        sa.Column('hire_date', sa.Date(), nullable=False, server_default=sa.func.current_date()),
        sa.Column('role', sa.String(), nullable=False, server_default='SEO Analyst'),
        sa.Column('status', sa.String(), nullable=False, server_default='active'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint("status IN ('active', 'inactive')", name='ck_members_status'),
    )
    op.create_index('ix_members_status', 'members', ['status'])

    op.create_table(
        'performance_records',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('members.id', ondelete='CASCADE'), nullable=False),
        sa.Column('month', sa.Integer(), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('metrics', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('member_id', 'month', 'year', name='uq_member_month_year'),
    )
    op.create_index('ix_performance_records_member_id', 'performance_records', ['member_id'])
    op.create_index('ix_performance_records_month_year', 'performance_records', ['month', 'year'])

    op.create_table(
        'kpi_targets',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('metric_key', sa.String(), nullable=False),
        sa.Column('role', sa.String(), nullable=False),
        sa.Column('monthly_target', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('annual_target', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('metric_key', 'role', name='uq_metric_role'),
    )
    op.create_index('ix_kpi_targets_role', 'kpi_targets', ['role'])

    op.create_table(
        'metric_definitions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('key', sa.String(), nullable=False, unique=True),
        sa.Column('display_name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('unit', sa.String(), nullable=False, server_default='count'),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        'roles',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False, unique=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table('roles')
    op.drop_table('metric_definitions')
    op.drop_index('ix_kpi_targets_role', table_name='kpi_targets')
    op.drop_table('kpi_targets')
    op.drop_index('ix_performance_records_month_year', table_name='performance_records')
    op.drop_index('ix_performance_records_member_id', table_name='performance_records')
    op.drop_table('performance_records')
    op.drop_index('ix_members_status', table_name='members')
    op.drop_table('members')
    op.drop_index('ix_admin_users_email', table_name='admin_users')
    op.drop_table('admin_users')
