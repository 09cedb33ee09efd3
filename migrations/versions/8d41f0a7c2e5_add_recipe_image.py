"""Add recipe_image table for per-user recipe galleries

Revision ID: 8d41f0a7c2e5
Revises: 3b7e2c1f9a40
Create Date: 2026-10-17 16:48:03.902114

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '8d41f0a7c2e5'
down_revision = '3b7e2c1f9a40'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'recipe_image',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('image_url', sa.String(length=500), nullable=False),
        sa.Column('image_type', sa.String(length=20), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('caption', sa.String(length=500), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_recipe_image_user_id', 'recipe_image', ['user_id'])
    op.create_index('ix_recipe_image_recipe_id', 'recipe_image', ['recipe_id'])


def downgrade():
    op.drop_index('ix_recipe_image_recipe_id', table_name='recipe_image')
    op.drop_index('ix_recipe_image_user_id', table_name='recipe_image')
    op.drop_table('recipe_image')
