"""Create submission table

Revision ID: 002
Revises: 001
Create Date: 2026-10-19 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = '002'
down_revision = '001'
branch_labels = None
depends_on = None


def upgrade():
    """Create submission table with uploader/reviewer lookup indexes."""

    op.create_table(
        'submission',
        sa.Column('id', postgresql.UUID(as_uuid=True), server_default=sa.text('gen_random_uuid()'), nullable=False),

        # File metadata (copied from the upload event)
        sa.Column('file_name', sa.Text(), nullable=False),
        sa.Column('file_path', sa.Text(), nullable=False),
        sa.Column('content_type', sa.Text(), nullable=False),
        sa.Column('size', sa.BigInteger(), nullable=False),

        # Parties
        sa.Column('uploader_id', sa.Text(), nullable=False),
        sa.Column('reviewer_id', sa.Text(), nullable=True),

        # Review state
        sa.Column('status', sa.Text(), nullable=False, server_default='pending'),
        sa.Column('notes', sa.Text(), nullable=False, server_default=''),

        # Timestamps
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.Column('reviewed_at', sa.TIMESTAMP(timezone=True), nullable=True),

        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint("status IN ('pending', 'done')", name='ck_submission_status'),
    )

    op.create_index('ix_submission_uploader_id', 'submission', ['uploader_id'])
    op.create_index('ix_submission_reviewer_id', 'submission', ['reviewer_id'])


def downgrade():
    """Drop submission table."""

    op.drop_index('ix_submission_reviewer_id', table_name='submission')
    op.drop_index('ix_submission_uploader_id', table_name='submission')
    op.drop_table('submission')
