"""create_ai_models

Revision ID: 001
Revises:
Create Date: 2026-09-14 10:12:40.118203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    if not inspector.has_table('ai_models'):
        op.create_table('ai_models',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('source_id', sa.String(length=255), nullable=True),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('company', sa.String(length=100), nullable=False),
        sa.Column('overall_intelligence', sa.Float(), nullable=False),
        sa.Column('benchmark_scores', sa.JSON(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_ai_models_id'), 'ai_models', ['id'], unique=False)
        op.create_index(op.f('ix_ai_models_source_id'), 'ai_models', ['source_id'], unique=True)
        op.create_index(op.f('ix_ai_models_name'), 'ai_models', ['name'], unique=False)
        op.create_index(op.f('ix_ai_models_company'), 'ai_models', ['company'], unique=False)
        op.create_index(op.f('ix_ai_models_overall_intelligence'), 'ai_models', ['overall_intelligence'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    if inspector.has_table('ai_models'):
        for index in ('overall_intelligence', 'company', 'name', 'source_id', 'id'):
            op.drop_index(op.f(f'ix_ai_models_{index}'), table_name='ai_models')
        op.drop_table('ai_models')
