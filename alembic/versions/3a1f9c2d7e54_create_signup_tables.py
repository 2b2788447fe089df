"""Create signups, challenge catalog and challenge selection tables

Revision ID: 3a1f9c2d7e54
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from app.services.challenge_catalog import CHALLENGE_CATALOG


# revision identifiers, used by Alembic.
revision: str = '3a1f9c2d7e54'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the waitlist tables and seed the fixed challenge catalog."""
    challenges = op.create_table(
        'challenges',
        sa.Column('key', sa.String(), primary_key=True),
        sa.Column('label', sa.String(), nullable=False, unique=True),
        sa.Column('position', sa.Integer(), nullable=False),
    )

    op.create_table(
        'signups',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('country_code', sa.String(), nullable=True),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('subject', sa.String(), nullable=False),
        sa.Column('stay_in_loop', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('other_challenge', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_signups_id', 'signups', ['id'])
    op.create_index('ix_signups_email', 'signups', ['email'], unique=True)

    op.create_table(
        'challenge_selections',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('signup_id', sa.String(), sa.ForeignKey('signups.id', ondelete='CASCADE'), nullable=False),
        sa.Column('challenge_key', sa.String(), sa.ForeignKey('challenges.key'), nullable=False),
        sa.UniqueConstraint('signup_id', 'challenge_key', name='uq_selection_signup_challenge'),
    )
    op.create_index('ix_challenge_selections_signup_id', 'challenge_selections', ['signup_id'])
    op.create_index('ix_challenge_selections_challenge_key', 'challenge_selections', ['challenge_key'])

    op.bulk_insert(
        challenges,
        [{'key': entry.key, 'label': entry.label, 'position': position}
         for position, entry in enumerate(CHALLENGE_CATALOG)],
    )


def downgrade() -> None:
    """Drop the waitlist tables."""
    op.drop_index('ix_challenge_selections_challenge_key', table_name='challenge_selections')
    op.drop_index('ix_challenge_selections_signup_id', table_name='challenge_selections')
    op.drop_table('challenge_selections')
    op.drop_index('ix_signups_email', table_name='signups')
    op.drop_index('ix_signups_id', table_name='signups')
    op.drop_table('signups')
    op.drop_table('challenges')
