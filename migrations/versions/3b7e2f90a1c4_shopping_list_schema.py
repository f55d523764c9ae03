"""Shopping list schema: households, plan weeks, manual items, checklist state

Revision ID: 3b7e2f90a1c4
Revises:
Create Date: 2026-10-18 09:12:44.118203

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7e2f90a1c4'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'household',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'household_member',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('household_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=64), nullable=False),
        sa.ForeignKeyConstraint(['household_id'], ['household.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_household_member_household_id', 'household_member', ['household_id'])
    op.create_index('ix_household_member_user_id', 'household_member', ['user_id'], unique=True)

    op.create_table(
        'ingredient',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('household_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('category', sa.String(length=50), nullable=True),
        sa.ForeignKeyConstraint(['household_id'], ['household.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('household_id', 'name', name='uq_ingredient_household_name'),
    )
    op.create_index('ix_ingredient_household_id', 'ingredient', ['household_id'])
    op.create_index('ix_ingredient_name', 'ingredient', ['name'])
    op.create_index('ix_ingredient_category', 'ingredient', ['category'])

    op.create_table(
        'recipe',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('household_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('servings_default', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['household_id'], ['household.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_recipe_household_id', 'recipe', ['household_id'])
    op.create_index('ix_recipe_name', 'recipe', ['name'])

    op.create_table(
        'recipe_item',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('ingredient_id', sa.Integer(), nullable=False),
        sa.Column('qty', sa.Float(), nullable=False),
        sa.Column('unit', sa.String(length=20), nullable=False),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipe.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['ingredient_id'], ['ingredient.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_recipe_item_recipe_id', 'recipe_item', ['recipe_id'])
    op.create_index('ix_recipe_item_ingredient_id', 'recipe_item', ['ingredient_id'])

    op.create_table(
        'plan_week',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('household_id', sa.Integer(), nullable=False),
        sa.Column('week_start', sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(['household_id'], ['household.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('household_id', 'week_start', name='uq_plan_week_household_start'),
    )
    op.create_index('ix_plan_week_household_id', 'plan_week', ['household_id'])

    op.create_table(
        'plan_entry',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('plan_week_id', sa.Integer(), nullable=False),
        sa.Column('entry_date', sa.Date(), nullable=False),
        sa.Column('meal', sa.String(length=20), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=True),
        sa.Column('servings_override', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['plan_week_id'], ['plan_week.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('plan_week_id', 'entry_date', 'meal', name='uq_plan_entry_slot'),
    )
    op.create_index('ix_plan_entry_plan_week_id', 'plan_entry', ['plan_week_id'])
    op.create_index('ix_plan_entry_recipe_id', 'plan_entry', ['recipe_id'])

    op.create_table(
        'manual_shopping_item',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('plan_week_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('category', sa.String(length=50), nullable=True),
        sa.Column('qty', sa.Float(), nullable=True),
        sa.Column('unit', sa.String(length=20), nullable=True),
        sa.Column('carry_forward', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['plan_week_id'], ['plan_week.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_manual_shopping_item_plan_week_id', 'manual_shopping_item', ['plan_week_id'])

    op.create_table(
        'shopping_list_state',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('plan_week_id', sa.Integer(), nullable=False),
        sa.Column('ingredient_id', sa.Integer(), nullable=False),
        sa.Column('unit', sa.String(length=20), nullable=False),
        sa.Column('in_cupboard', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('in_trolley', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.ForeignKeyConstraint(['plan_week_id'], ['plan_week.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('plan_week_id', 'ingredient_id', 'unit', name='uq_shopping_state_key'),
    )
    op.create_index('ix_shopping_list_state_plan_week_id', 'shopping_list_state', ['plan_week_id'])

    op.create_table(
        'manual_shopping_state',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('plan_week_id', sa.Integer(), nullable=False),
        sa.Column('manual_item_id', sa.Integer(), nullable=False),
        sa.Column('in_cupboard', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('in_trolley', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.ForeignKeyConstraint(['plan_week_id'], ['plan_week.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['manual_item_id'], ['manual_shopping_item.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('plan_week_id', 'manual_item_id', name='uq_manual_state_key'),
    )
    op.create_index('ix_manual_shopping_state_plan_week_id', 'manual_shopping_state', ['plan_week_id'])
    op.create_index('ix_manual_shopping_state_manual_item_id', 'manual_shopping_state', ['manual_item_id'])


def downgrade():
    op.drop_table('manual_shopping_state')
    op.drop_table('shopping_list_state')
    op.drop_table('manual_shopping_item')
    op.drop_table('plan_entry')
    op.drop_table('plan_week')
    op.drop_table('recipe_item')
    op.drop_table('recipe')
    op.drop_table('ingredient')
    op.drop_table('household_member')
    op.drop_table('household')
