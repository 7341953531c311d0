"""Create tracker_state storage slot table

Revision ID: 3f9a1c7e2b10
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f9a1c7e2b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('tracker_state',
        sa.Column('key', sa.String(length=100), nullable=False),
        sa.Column('value', sa.Text(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('key')
    )


def downgrade():
    op.drop_table('tracker_state')
