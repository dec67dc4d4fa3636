"""create_tests_and_results

Revision ID: 3f2c9a7b1d40
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f2c9a7b1d40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('tests',
        sa.Column('pk', sa.Integer(), nullable=False),
        sa.Column('test_id', sa.String(128), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('subject', sa.String(255), nullable=False),
        sa.Column('duration', sa.Float(), nullable=False),
        sa.Column('questions', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('pk')
    )
    op.create_index('ix_tests_test_id', 'tests', ['test_id'], unique=True)

    op.create_table('results',
        sa.Column('pk', sa.Integer(), nullable=False),
        sa.Column('attempt_id', sa.String(64), nullable=False),
        sa.Column('test_id', sa.String(128), nullable=False),
        sa.Column('test_name', sa.String(255), nullable=True),
        sa.Column('user_id', sa.String(128), nullable=True),
        sa.Column('total_questions', sa.Integer(), nullable=True),
        sa.Column('correct', sa.Integer(), nullable=True),
        sa.Column('wrong', sa.Integer(), nullable=True),
        sa.Column('skipped', sa.Integer(), nullable=True),
        sa.Column('total_score', sa.Float(), nullable=True),
        sa.Column('percentage', sa.Float(), nullable=False),
        sa.Column('total_time', sa.String(32), nullable=True),
        sa.Column('answers', sa.JSON(), nullable=False),
        sa.Column('question_times', sa.JSON(), nullable=False),
        sa.Column('results_data', sa.JSON(), nullable=False),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('pk')
    )
    op.create_index('ix_results_attempt_id', 'results', ['attempt_id'], unique=True)
    op.create_index('ix_results_test_id', 'results', ['test_id'])
    op.create_index('ix_results_completed_at', 'results', ['completed_at'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_results_completed_at', table_name='results')
    op.drop_index('ix_results_test_id', table_name='results')
    op.drop_index('ix_results_attempt_id', table_name='results')
    op.drop_table('results')
    op.drop_index('ix_tests_test_id', table_name='tests')
    op.drop_table('tests')
