"""Initial schema for collections, meal plans, favourites, shopping lists and notes

Revision ID: 3b7e2c1f9a40
Revises:
Create Date: 2026-10-17 10:12:41.518230

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7e2c1f9a40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'recipe_collection',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('color', sa.String(length=20), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_recipe_collection_user_id', 'recipe_collection', ['user_id'])

    op.create_table(
        'collection_item',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('collection_id', sa.Integer(), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('recipe_title', sa.String(length=300), nullable=False),
        sa.Column('recipe_image', sa.String(length=500), nullable=True),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['collection_id'], ['recipe_collection.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_collection_item_collection_id', 'collection_item', ['collection_id'])
    op.create_index('ix_collection_item_recipe_id', 'collection_item', ['recipe_id'])

    op.create_table(
        'meal_plan',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('week_start', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'week_start', name='uq_meal_plan_user_week'),
    )
    op.create_index('ix_meal_plan_user_id', 'meal_plan', ['user_id'])

    op.create_table(
        'meal_plan_item',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('meal_plan_id', sa.Integer(), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('recipe_title', sa.String(length=300), nullable=False),
        sa.Column('recipe_image', sa.String(length=500), nullable=True),
        sa.Column('day_of_week', sa.Integer(), nullable=False),
        sa.Column('meal_type', sa.String(length=20), nullable=False),
        sa.Column('servings', sa.Integer(), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['meal_plan_id'], ['meal_plan.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_meal_plan_item_meal_plan_id', 'meal_plan_item', ['meal_plan_id'])

    op.create_table(
        'favourite_recipe',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'recipe_id', name='uq_favourite_user_recipe'),
    )
    op.create_index('ix_favourite_recipe_user_id', 'favourite_recipe', ['user_id'])

    op.create_table(
        'shopping_list',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('recipe_ids', sa.JSON(), nullable=False),
        sa.Column('items', sa.JSON(), nullable=False),
        sa.Column('is_completed', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_shopping_list_user_id', 'shopping_list', ['user_id'])

    op.create_table(
        'recipe_note',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=True),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=True),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'recipe_id', name='uq_recipe_note_user_recipe'),
    )
    op.create_index('ix_recipe_note_user_id', 'recipe_note', ['user_id'])


def downgrade():
    op.drop_index('ix_recipe_note_user_id', table_name='recipe_note')
    op.drop_table('recipe_note')
    op.drop_index('ix_shopping_list_user_id', table_name='shopping_list')
    op.drop_table('shopping_list')
    op.drop_index('ix_favourite_recipe_user_id', table_name='favourite_recipe')
    op.drop_table('favourite_recipe')
    op.drop_index('ix_meal_plan_item_meal_plan_id', table_name='meal_plan_item')
    op.drop_table('meal_plan_item')
    op.drop_index('ix_meal_plan_user_id', table_name='meal_plan')
    op.drop_table('meal_plan')
    op.drop_index('ix_collection_item_recipe_id', table_name='collection_item')
    op.drop_index('ix_collection_item_collection_id', table_name='collection_item')
    op.drop_table('collection_item')
    op.drop_index('ix_recipe_collection_user_id', table_name='recipe_collection')
    op.drop_table('recipe_collection')
