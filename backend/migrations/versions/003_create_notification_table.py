"""Create notification table

Revision ID: 003
Revises: 002
Create Date: 2026-10-19 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = '003'
down_revision = '002'
branch_labels = None
depends_on = None


def upgrade():
    """Create notification table.

    The (read, created_at) index serves the retention sweep predicate.
    """

    op.create_table(
        'notification',
        sa.Column('id', postgresql.UUID(as_uuid=True), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('recipient_id', sa.Text(), nullable=False),
        sa.Column('type', sa.Text(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('read', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('data', postgresql.JSONB(astext_type=sa.Text()), nullable=False, server_default=sa.text("'{}'::jsonb")),
        sa.Column('action_url', sa.Text(), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('NOW()'), nullable=False),

        sa.PrimaryKeyConstraint('id'),
    )

    op.create_index('ix_notification_recipient_id', 'notification', ['recipient_id'])
    op.create_index('ix_notification_read_created_at', 'notification', ['read', 'created_at'])


def downgrade():
    """Drop notification table."""

    op.drop_index('ix_notification_read_created_at', table_name='notification')
    op.drop_index('ix_notification_recipient_id', table_name='notification')
    op.drop_table('notification')
