"""create_tasks_and_daily_logs

Revision ID: 4c2e9a7d1b30
Revises:
Create Date: 2026-10-19 09:12:41.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = '4c2e9a7d1b30'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'tasks',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('is_completed', sa.Boolean(), server_default='false', nullable=False),
        sa.Column(
            'category',
            sa.Enum('planting', 'maintenance', 'animals', 'general', name='task_category_enum'),
            nullable=False,
        ),
        sa.Column('urgency', sa.Enum('low', 'medium', 'high', name='task_urgency_enum'), nullable=True),
        sa.Column('recurrence', sa.String(length=20), nullable=False),
        sa.Column('specific_date', sa.Date(), nullable=True),
        sa.Column('month_reference', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_tasks_specific_date'), 'tasks', ['specific_date'], unique=False)
    op.create_index(op.f('ix_tasks_created_at'), 'tasks', ['created_at'], unique=False)

    op.create_table(
        'daily_logs',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('log_date', sa.Date(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_daily_logs_log_date'), 'daily_logs', ['log_date'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_daily_logs_log_date'), table_name='daily_logs')
    op.drop_table('daily_logs')

    op.drop_index(op.f('ix_tasks_created_at'), table_name='tasks')
    op.drop_index(op.f('ix_tasks_specific_date'), table_name='tasks')
    op.drop_table('tasks')

    # Enum types outlive their tables on Postgres
    sa.Enum(name='task_urgency_enum').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='task_category_enum').drop(op.get_bind(), checkfirst=True)
