"""add Version columns for optimistic concurrency

Revision ID: 7a4e9c0d2b31
Revises: 3f1c2a7b9d10
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '7a4e9c0d2b31'
down_revision: Union[str, Sequence[str], None] = '3f1c2a7b9d10'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # batch mode so SQLite can rebuild the tables
    with op.batch_alter_table('Breeds') as batch:
        batch.add_column(sa.Column('Version', sa.Integer(), nullable=False, server_default='1'))
    with op.batch_alter_table('Animals') as batch:
        batch.add_column(sa.Column('Version', sa.Integer(), nullable=False, server_default='1'))


def downgrade() -> None:
    with op.batch_alter_table('Animals') as batch:
        batch.drop_column('Version')
    with op.batch_alter_table('Breeds') as batch:
        batch.drop_column('Version')
