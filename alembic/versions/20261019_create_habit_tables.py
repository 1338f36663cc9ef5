"""create habits, habit_week_days, days and day_habits

Revision ID: 20261019_create_habit_tables
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '20261019_create_habit_tables'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'habits',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_habits_created_at', 'habits', ['created_at'])

    op.create_table(
        'habit_week_days',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('habit_id', sa.Uuid(), sa.ForeignKey('habits.id'), nullable=False),
        sa.Column('week_day', sa.Integer(), nullable=False),
    )
    op.create_index('ix_habit_week_days_habit_id', 'habit_week_days', ['habit_id'])
    op.create_index('ix_habit_week_days_week_day', 'habit_week_days', ['week_day'])

    op.create_table(
        'days',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('date', sa.DateTime(), nullable=False, unique=True),
    )

    op.create_table(
        'day_habits',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('day_id', sa.Uuid(), sa.ForeignKey('days.id'), nullable=False),
        sa.Column('habit_id', sa.Uuid(), sa.ForeignKey('habits.id'), nullable=False),
        sa.UniqueConstraint('day_id', 'habit_id', name='uq_day_habits_day_habit'),
    )
    op.create_index('ix_day_habits_day_id', 'day_habits', ['day_id'])
    op.create_index('ix_day_habits_habit_id', 'day_habits', ['habit_id'])


def downgrade() -> None:
    op.drop_index('ix_day_habits_habit_id', table_name='day_habits')
    op.drop_index('ix_day_habits_day_id', table_name='day_habits')
    op.drop_table('day_habits')
    op.drop_table('days')
    op.drop_index('ix_habit_week_days_week_day', table_name='habit_week_days')
    op.drop_index('ix_habit_week_days_habit_id', table_name='habit_week_days')
    op.drop_table('habit_week_days')
    op.drop_index('ix_habits_created_at', table_name='habits')
    op.drop_table('habits')
