"""Add progress tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

METRIC_COLUMNS = [
    'weight', 'bmi', 'fat_percentage', 'muscle_mass', 'bmr', 'metabolic_age', 'visceral_fat',
    'body_water_percentage', 'physique_rating', 'chest_circumference', 'waist_circumference',
    'glutes_circumference',
]


def upgrade() -> None:
    """Create users, measurement, workout, weekly task, report and notification tables."""
    op.create_table('users', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('full_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('role', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False, server_default='user'),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('group_names', sa.JSON(), nullable=False),
        sa.Column('baselines', sa.JSON(), nullable=False),
        sa.Column('needs_final_feedback', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('last_program_report_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table('measurement_entries', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        *[sa.Column(name, sa.Float(), nullable=True) for name in METRIC_COLUMNS],
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_measurement_entries_user_id'), 'measurement_entries', ['user_id'])
    op.create_index(op.f('ix_measurement_entries_date'), 'measurement_entries', ['date'])

    op.create_table('workouts', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('status', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('title', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('sections', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_workouts_user_id'), 'workouts', ['user_id'])
    op.create_index(op.f('ix_workouts_date'), 'workouts', ['date'])
    op.create_index(op.f('ix_workouts_status'), 'workouts', ['status'])

    op.create_table('weekly_tasks', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('week', sa.Integer(), nullable=False),
        sa.Column('week_start_date', sa.Date(), nullable=True),
        sa.Column('week_end_date', sa.Date(), nullable=True),
        sa.Column('status', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False, server_default='pending'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'week', name='uq_weekly_task_user_week'))
    op.create_index(op.f('ix_weekly_tasks_user_id'), 'weekly_tasks', ['user_id'])

    op.create_table('generated_reports', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('report_kind', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column('period_start', sa.Date(), nullable=False),
        sa.Column('period_end', sa.Date(), nullable=False),
        sa.Column('metrics_table', sa.JSON(), nullable=False),
        sa.Column('chart_specs', sa.JSON(), nullable=False),
        sa.Column('exercise_summaries', sa.JSON(), nullable=False),
        sa.Column('generated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_generated_reports_user_id'), 'generated_reports', ['user_id'])
    op.create_index(op.f('ix_generated_reports_generated_at'), 'generated_reports', ['generated_at'])

    op.create_table('coach_notifications', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('notification_type', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column('report_kind', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=True),
        sa.Column('report_id', sa.Integer(), nullable=True),
        sa.Column('details', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=False),
        sa.Column('is_read', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['report_id'], ['generated_reports.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_coach_notifications_user_id'), 'coach_notifications', ['user_id'])


def downgrade() -> None:
    """Drop all progress tables."""
    op.drop_index(op.f('ix_coach_notifications_user_id'), table_name='coach_notifications')
    op.drop_table('coach_notifications')
    op.drop_index(op.f('ix_generated_reports_generated_at'), table_name='generated_reports')
    op.drop_index(op.f('ix_generated_reports_user_id'), table_name='generated_reports')
    op.drop_table('generated_reports')
    op.drop_index(op.f('ix_weekly_tasks_user_id'), table_name='weekly_tasks')
    op.drop_table('weekly_tasks')
    op.drop_index(op.f('ix_workouts_status'), table_name='workouts')
    op.drop_index(op.f('ix_workouts_date'), table_name='workouts')
    op.drop_index(op.f('ix_workouts_user_id'), table_name='workouts')
    op.drop_table('workouts')
    op.drop_index(op.f('ix_measurement_entries_date'), table_name='measurement_entries')
    op.drop_index(op.f('ix_measurement_entries_user_id'), table_name='measurement_entries')
    op.drop_table('measurement_entries')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
