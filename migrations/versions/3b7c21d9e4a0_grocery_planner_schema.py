"""Grocery planner schema: recipes, meal plans, meals, pantry, grocery lists

Revision ID: 3b7c21d9e4a0
Revises:
Create Date: 2026-10-18 09:12:40.118204

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7c21d9e4a0'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'recipe',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('owner_id', sa.String(length=128), nullable=True),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('ingredients', sa.JSON(), nullable=False),
        sa.Column('base_servings', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('instructions', sa.Text(), nullable=True),
        sa.Column('url', sa.String(length=500), nullable=True),
        sa.Column('image_url', sa.String(length=500), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_recipe_owner_id', 'recipe', ['owner_id'])
    op.create_index('ix_recipe_title', 'recipe', ['title'])

    op.create_table(
        'meal_plan',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('owner_id', sa.String(length=128), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_meal_plan_owner_id', 'meal_plan', ['owner_id'])

    op.create_table(
        'meal',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('meal_plan_id', sa.String(length=36),
                  sa.ForeignKey('meal_plan.id', ondelete='CASCADE'), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('meal_time', sa.String(length=20), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('recipe_id', sa.String(length=36),
                  sa.ForeignKey('recipe.id', ondelete='SET NULL'), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('servings', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_meal_meal_plan_id', 'meal', ['meal_plan_id'])
    op.create_index('ix_meal_recipe_id', 'meal', ['recipe_id'])

    op.create_table(
        'pantry_item',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('owner_id', sa.String(length=128), nullable=True),
        sa.Column('item', sa.String(length=200), nullable=False),
        sa.Column('quantity', sa.Float(), nullable=False),
        sa.Column('unit', sa.String(length=30), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_pantry_item_owner_id', 'pantry_item', ['owner_id'])

    op.create_table(
        'grocery_list',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('meal_plan_id', sa.String(length=36),
                  sa.ForeignKey('meal_plan.id', ondelete='CASCADE'), nullable=False),
        sa.Column('meta', sa.JSON(), nullable=False),
        sa.Column('items', sa.JSON(), nullable=False),
        sa.Column('summary', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_grocery_list_meal_plan_id', 'grocery_list', ['meal_plan_id'])
    op.create_index('ix_grocery_list_created_at', 'grocery_list', ['created_at'])


def downgrade():
    op.drop_table('grocery_list')
    op.drop_table('pantry_item')
    op.drop_table('meal')
    op.drop_table('meal_plan')
    op.drop_table('recipe')
