"""create snapshot table

Revision ID: 3c1f0a9d2b7e
Revises: 
Create Date: 2025-02-10 09:42:17.118204

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c1f0a9d2b7e'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'snapshot',
        sa.Column('id', sa.String(length=255), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('original', sa.Text(), nullable=True),
        sa.Column('preview', sa.Text(), nullable=True),
        sa.Column('text', sa.Text(), nullable=True),
        sa.Column('thumbnail', sa.Text(), nullable=True),
        sa.Column('status', sa.Text(), nullable=True),
        sa.Column('task_id', sa.String(length=255), nullable=True),
        sa.Column('language', sa.String(length=64), nullable=True),
        sa.Column('create_time', sa.DateTime(), nullable=False),
        sa.Column('update_time', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )


def downgrade():
    op.drop_table('snapshot')
