"""Initial schema: users, exercises, activities, daily logs, goals and tasks

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    ]


def upgrade():
    op.create_table('users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('full_name', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table('exercises',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.Column('exercise_type', sa.String(length=32), nullable=False),
        sa.Column('pmg', sa.String(length=32), nullable=False),
        sa.Column('exercise_intensity', sa.String(length=16), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_exercises_id', 'exercises', ['id'])
    op.create_index('ix_exercises_name', 'exercises', ['name'], unique=True)
    op.create_index('ix_exercises_exercise_type', 'exercises', ['exercise_type'])
    op.create_index('ix_exercises_pmg', 'exercises', ['pmg'])
    op.create_index('ix_exercises_exercise_intensity', 'exercises', ['exercise_intensity'])

    op.create_table('activities',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('exercise_id', sa.Integer(), nullable=True),
        sa.Column('duration', sa.Float(), nullable=True),
        sa.Column('reps', sa.Integer(), nullable=True),
        sa.Column('weight', sa.Float(), nullable=True),
        sa.Column('distance', sa.Float(), nullable=True),
        sa.Column('laps', sa.Integer(), nullable=True),
        sa.Column('sets', sa.Integer(), nullable=True),
        sa.Column('date', sa.Date(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['exercise_id'], ['exercises.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'exercise_id', 'date', name='uq_activity_user_exercise_date')
    )
    op.create_index('ix_activities_id', 'activities', ['id'])
    op.create_index('ix_activities_user_id', 'activities', ['user_id'])
    op.create_index('ix_activities_exercise_id', 'activities', ['exercise_id'])
    op.create_index('ix_activities_date', 'activities', ['date'])
    op.create_index('idx_activity_user_date', 'activities', ['user_id', 'date'])

    op.create_table('nutrition',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('protein_intake', sa.String(length=16), nullable=False),
        sa.Column('fruit_intake', sa.String(length=16), nullable=False),
        sa.Column('green_intake', sa.String(length=16), nullable=False),
        sa.Column('sugar_intake', sa.String(length=16), nullable=False),
        sa.Column('junk_intake', sa.String(length=16), nullable=False),
        sa.Column('water_intake', sa.String(length=16), nullable=False),
        sa.Column('tobacco_intake', sa.String(length=16), nullable=False),
        sa.Column('alcohol_intake', sa.String(length=16), nullable=False),
        sa.Column('pot_intake', sa.String(length=16), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'date', name='uq_nutrition_user_date')
    )
    op.create_index('ix_nutrition_id', 'nutrition', ['id'])
    op.create_index('ix_nutrition_user_id', 'nutrition', ['user_id'])
    op.create_index('ix_nutrition_date', 'nutrition', ['date'])

    op.create_table('lifeparams',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('sleep', sa.Float(), nullable=False),
        sa.Column('office_productivity', sa.String(length=16), nullable=False),
        sa.Column('stress', sa.String(length=16), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'date', name='uq_lifeparam_user_date')
    )
    op.create_index('ix_lifeparams_id', 'lifeparams', ['id'])
    op.create_index('ix_lifeparams_user_id', 'lifeparams', ['user_id'])
    op.create_index('ix_lifeparams_date', 'lifeparams', ['date'])

    op.create_table('interests',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('write', sa.Boolean(), nullable=True),
        sa.Column('video', sa.Boolean(), nullable=True),
        sa.Column('read', sa.Boolean(), nullable=True),
        sa.Column('cook', sa.Boolean(), nullable=True),
        sa.Column('travel', sa.Boolean(), nullable=True),
        sa.Column('social', sa.Boolean(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'date', name='uq_interest_user_date')
    )
    op.create_index('ix_interests_id', 'interests', ['id'])
    op.create_index('ix_interests_user_id', 'interests', ['user_id'])
    op.create_index('ix_interests_date', 'interests', ['date'])

    op.create_table('goals',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('aspiration', sa.Text(), nullable=False),
        sa.Column('aspired_at', sa.DateTime(), nullable=False),
        sa.Column('milestones', sa.DateTime(), nullable=False),
        sa.Column('red_line', sa.DateTime(), nullable=False),
        sa.Column('category', sa.String(length=64), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_goals_id', 'goals', ['id'])
    op.create_index('ix_goals_user_id', 'goals', ['user_id'])
    op.create_index('ix_goals_category', 'goals', ['category'])

    op.create_table('tasks',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('definition', sa.Text(), nullable=False),
        sa.Column('start_at', sa.DateTime(), nullable=False),
        sa.Column('red_line', sa.DateTime(), nullable=False),
        sa.Column('effort', sa.Float(), nullable=False),
        sa.Column('consequence', sa.String(length=16), nullable=False),
        sa.Column('category', sa.String(length=64), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_tasks_id', 'tasks', ['id'])
    op.create_index('ix_tasks_user_id', 'tasks', ['user_id'])
    op.create_index('ix_tasks_category', 'tasks', ['category'])


def downgrade():
    for table in ('tasks', 'goals', 'interests', 'lifeparams', 'nutrition', 'activities', 'exercises', 'users'):
        op.drop_table(table)
