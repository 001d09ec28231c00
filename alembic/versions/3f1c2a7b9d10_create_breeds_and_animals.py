"""create Breeds and Animals tables

Revision ID: 3f1c2a7b9d10
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a7b9d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'Breeds',
        sa.Column('BreedId', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('BreedName', sa.String(length=50), nullable=False),
        sa.Column('Description', sa.String(length=2000), nullable=False),
        sa.PrimaryKeyConstraint('BreedId', name=op.f('PK_Breeds')),
    )
    op.create_table(
        'Animals',
        sa.Column('AnimalId', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('Name', sa.String(length=50), nullable=False),
        sa.Column('Description', sa.String(length=2000), nullable=False),
        sa.Column('BreedId', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ['BreedId'],
            ['Breeds.BreedId'],
            name=op.f('FK_Animals_Breeds_BreedId'),
            ondelete='RESTRICT',
        ),
        sa.PrimaryKeyConstraint('AnimalId', name=op.f('PK_Animals')),
    )
    op.create_index(op.f('IX_Animals_BreedId'), 'Animals', ['BreedId'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('IX_Animals_BreedId'), table_name='Animals')
    op.drop_table('Animals')
    op.drop_table('Breeds')
