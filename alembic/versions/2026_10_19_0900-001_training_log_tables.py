"""Add profile, template, session and set log tables

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


def upgrade() -> None:
    """Create profiles, workout_days, exercises, training_sessions and set_logs."""
    op.create_table('profiles', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('display_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('training_days_per_week', sa.Integer(), nullable=True),
        sa.Column('onboarding_completed', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_profiles_user_id'), 'profiles', ['user_id'], unique=True)

    op.create_table('workout_days', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('day_number', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'day_number', name='uq_workout_day_user_number'))
    op.create_index(op.f('ix_workout_days_user_id'), 'workout_days', ['user_id'], unique=False)

    op.create_table('exercises', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('workout_day_id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column('muscle_group', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['workout_day_id'], ['workout_days.id'], ),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_exercises_user_id'), 'exercises', ['user_id'], unique=False)
    op.create_index(op.f('ix_exercises_workout_day_id'), 'exercises', ['workout_day_id'], unique=False)

    op.create_table('training_sessions', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('workout_day_id', sa.Integer(), nullable=True),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['workout_day_id'], ['workout_days.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'workout_day_id', 'date', name='uq_training_user_day_date'))
    op.create_index(op.f('ix_training_sessions_user_id'), 'training_sessions', ['user_id'], unique=False)
    op.create_index(op.f('ix_training_sessions_workout_day_id'), 'training_sessions', ['workout_day_id'],
                    unique=False)
    op.create_index(op.f('ix_training_sessions_date'), 'training_sessions', ['date'], unique=False)

    op.create_table('set_logs', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('training_session_id', sa.Integer(), nullable=False),
        sa.Column('exercise_id', sa.Integer(), nullable=True),
        sa.Column('exercise_name', sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column('muscle_group', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        sa.Column('set_number', sa.Integer(), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=False),
        sa.Column('weight', sa.Float(), nullable=False),
        sa.Column('is_pr', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['training_session_id'], ['training_sessions.id'], ),
        sa.ForeignKeyConstraint(['exercise_id'], ['exercises.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_set_logs_user_id'), 'set_logs', ['user_id'], unique=False)
    op.create_index(op.f('ix_set_logs_training_session_id'), 'set_logs', ['training_session_id'], unique=False)
    op.create_index(op.f('ix_set_logs_exercise_id'), 'set_logs', ['exercise_id'], unique=False)
    op.create_index(op.f('ix_set_logs_exercise_name'), 'set_logs', ['exercise_name'], unique=False)


def downgrade() -> None:
    """Drop all training log tables."""
    op.drop_index(op.f('ix_set_logs_exercise_name'), table_name='set_logs')
    op.drop_index(op.f('ix_set_logs_exercise_id'), table_name='set_logs')
    op.drop_index(op.f('ix_set_logs_training_session_id'), table_name='set_logs')
    op.drop_index(op.f('ix_set_logs_user_id'), table_name='set_logs')
    op.drop_table('set_logs')
    op.drop_index(op.f('ix_training_sessions_date'), table_name='training_sessions')
    op.drop_index(op.f('ix_training_sessions_workout_day_id'), table_name='training_sessions')
    op.drop_index(op.f('ix_training_sessions_user_id'), table_name='training_sessions')
    op.drop_table('training_sessions')
    op.drop_index(op.f('ix_exercises_workout_day_id'), table_name='exercises')
    op.drop_index(op.f('ix_exercises_user_id'), table_name='exercises')
    op.drop_table('exercises')
    op.drop_index(op.f('ix_workout_days_user_id'), table_name='workout_days')
    op.drop_table('workout_days')
    op.drop_index(op.f('ix_profiles_user_id'), table_name='profiles')
    op.drop_table('profiles')
