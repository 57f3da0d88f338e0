"""create user, income and expense tables

Revision ID: 5d2c8e1f9a40
Revises:
Create Date: 2026-10-19 10:12:41.508223

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel

# revision identifiers, used by Alembic.
revision: str = '5d2c8e1f9a40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

def upgrade() -> None:
    """Upgrade schema: create user, income and expense tables."""
    op.create_table(
        'user',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('hashed_password', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index(op.f('ix_user_email'), 'user', ['email'], unique=True)

    for table, label in (('income', 'source'), ('expense', 'category')):
        op.create_table(
            table,
            sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
            sa.Column('user_id', sa.Uuid(), sa.ForeignKey('user.id'), nullable=False),
            sa.Column('amount', sa.Float(), nullable=False),
            sa.Column(label, sqlmodel.sql.sqltypes.AutoString(), nullable=False),
            sa.Column('date', sa.DateTime(timezone=True), nullable=False),
            sa.Column('icon', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        )
        op.create_index(op.f(f'ix_{table}_user_id'), table, ['user_id'], unique=False)
        op.create_index(op.f(f'ix_{table}_date'), table, ['date'], unique=False)

def downgrade() -> None:
    """Downgrade schema: drop expense, income and user tables."""
    for table in ('expense', 'income'):
        op.drop_index(op.f(f'ix_{table}_date'), table_name=table)
        op.drop_index(op.f(f'ix_{table}_user_id'), table_name=table)
        op.drop_table(table)
    op.drop_index(op.f('ix_user_email'), table_name='user')
    op.drop_table('user')
