"""Add website builder behavior and preferences tables

Revision ID: 0001_behavior_and_preferences
Revises:
Create Date: 2026-10-19

Creates tables for template suggestions:
- website_builder_user_behavior: append-only log of user actions
- website_builder_user_preferences: one derived snapshot per user
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = '0001_behavior_and_preferences'
down_revision = None
branch_labels = None
depends_on = None

JSON_TYPE = sa.JSON().with_variant(postgresql.JSONB(astext_type=sa.Text()), 'postgresql')


def upgrade() -> None:
    # Create website_builder_user_behavior table
    op.create_table(
        'website_builder_user_behavior',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('action', sa.String(20), nullable=False),
        sa.Column('item_type', sa.String(20), nullable=False),
        sa.Column('item_id', sa.String(255), nullable=False),
        sa.Column('item_details', JSON_TYPE, nullable=True),
        sa.Column('timestamp', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(
        'ix_website_builder_user_behavior_user_id',
        'website_builder_user_behavior', ['user_id'], unique=False
    )
    op.create_index(
        'ix_website_builder_user_behavior_timestamp',
        'website_builder_user_behavior', ['timestamp'], unique=False
    )

    # Create website_builder_user_preferences table
    op.create_table(
        'website_builder_user_preferences',
        sa.Column('user_id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('preferred_categories', JSON_TYPE, nullable=False),
        sa.Column('preferred_complexity', sa.String(20), server_default='beginner', nullable=False),
        sa.Column('preferred_tags', JSON_TYPE, nullable=False),
        sa.Column('last_active_timestamp', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('user_id')
    )


def downgrade() -> None:
    op.drop_table('website_builder_user_preferences')
    op.drop_index('ix_website_builder_user_behavior_timestamp', table_name='website_builder_user_behavior')
    op.drop_index('ix_website_builder_user_behavior_user_id', table_name='website_builder_user_behavior')
    op.drop_table('website_builder_user_behavior')
