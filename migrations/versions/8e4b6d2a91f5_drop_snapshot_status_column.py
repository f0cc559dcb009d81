"""drop snapshot status column

Revision ID: 8e4b6d2a91f5
Revises: 3c1f0a9d2b7e
Create Date: 2025-02-28 11:06:53.740912

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '8e4b6d2a91f5'
down_revision = '3c1f0a9d2b7e'
branch_labels = None
depends_on = None


def upgrade():
    op.drop_column('snapshot', 'status')


def downgrade():
    # Only the column comes back, previous values are lost
    op.add_column('snapshot', sa.Column('status', sa.Text(), nullable=True))
