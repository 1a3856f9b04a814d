"""create sets table

Revision ID: 8d4e6b0a5c21
Revises: 1f3a9c2b7d10
Create Date: 2026-10-19 09:14:02.530871

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8d4e6b0a5c21'
down_revision: Union[str, None] = '1f3a9c2b7d10'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # user_id is not a FK: the auth tables are provisioned on their own
    op.create_table(
        'sets',
        sa.Column('user_id', sa.String(length=120), primary_key=True),
        sa.Column('id', sa.String(length=64), primary_key=True),
        sa.Column('weight', sa.Numeric(10, 2), nullable=False),
        sa.Column('exercise', sa.String(length=120), nullable=False),
        sa.Column('repetitions', sa.Integer(), nullable=False),
        sa.Column('created_date', sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint('id', name='uq_sets_id'),
    )
    op.create_index(op.f('ix_sets_user_id'), 'sets', ['user_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_sets_user_id'), table_name='sets')
    op.drop_table('sets')
