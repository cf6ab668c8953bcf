"""Create option table

Revision ID: 3b7e2c9a41d0
Revises:
Create Date: 2026-10-17 19:20:11.402215

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7e2c9a41d0'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'option',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('option_key', sa.String(length=100), nullable=False),
        sa.Column('option_value', sa.Text(), nullable=False),
        sa.Column('source', sa.String(length=20), nullable=False, server_default='SYSTEM'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('option', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_option_option_key'), ['option_key'], unique=True)


def downgrade():
    with op.batch_alter_table('option', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_option_option_key'))

    op.drop_table('option')
