"""Initial schema: invites table with unique key and guest_name.

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'invites',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('key', sa.Text(), nullable=False),
        sa.Column('guest_name', sa.Text(), nullable=False),
        sa.Column(
            'created_at', sa.DateTime(timezone=True),
            nullable=False, server_default=sa.func.now(),
        ),
        sa.Column('scanned', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('scanned_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_invites_key', 'invites', ['key'], unique=True)
    op.create_index('ix_invites_guest_name', 'invites', ['guest_name'], unique=True)
    op.create_index('ix_invites_created_at', 'invites', ['created_at'])


def downgrade() -> None:
    op.drop_index('ix_invites_created_at', table_name='invites')
    op.drop_index('ix_invites_guest_name', table_name='invites')
    op.drop_index('ix_invites_key', table_name='invites')
    op.drop_table('invites')
