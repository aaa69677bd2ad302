"""initial ayora models

Revision ID: 3a7c1e9b5d20
Revises: 
Create Date: 2026-10-18 09:30:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3a7c1e9b5d20'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    if not insp.has_table('roles'):
        op.create_table(
            'roles',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=50), nullable=False, unique=True),
            sa.Column('description', sa.String(length=255), nullable=True),
        )

    if not insp.has_table('users'):
        op.create_table(
            'users',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=50), nullable=False),
            sa.Column('email', sa.String(length=120), nullable=False, unique=True),
            sa.Column('password', sa.String(length=255), nullable=False),
            sa.Column('role_id', sa.Integer(), sa.ForeignKey('roles.id'), nullable=True),
            sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
            sa.Column('last_login', sa.DateTime(), nullable=True),
            sa.Column('doctor_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=True),
            sa.Column('age', sa.Integer(), nullable=True),
            sa.Column('gender', sa.String(length=20), nullable=True),
            sa.Column('height_cm', sa.Numeric(6, 2), nullable=True),
            sa.Column('weight_kg', sa.Numeric(6, 2), nullable=True),
            sa.Column('medical_conditions', sa.JSON(), nullable=True),
            sa.Column('allergies', sa.JSON(), nullable=True),
            sa.Column('ayurvedic_body_type', sa.String(length=20), nullable=True),
            sa.Column('dietary_preferences', sa.JSON(), nullable=True),
            sa.Column('emergency_contact', sa.JSON(), nullable=True),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )
        op.create_index('ix_users_email', 'users', ['email'])
        op.create_index('ix_users_role_id', 'users', ['role_id'])

    if not insp.has_table('meals'):
        op.create_table(
            'meals',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
            sa.Column('meal_type', sa.String(length=20), nullable=False, server_default='other'),
            sa.Column('food_name', sa.String(length=200), nullable=False),
            sa.Column('description', sa.String(length=500), nullable=True),
            sa.Column('quantity', sa.Numeric(10, 2), nullable=False),
            sa.Column('unit', sa.String(length=20), nullable=False, server_default='serving'),
            sa.Column('calories', sa.Numeric(10, 2), nullable=False, server_default='0'),
            sa.Column('protein', sa.Numeric(10, 2), nullable=False, server_default='0'),
            sa.Column('carbohydrates', sa.Numeric(10, 2), nullable=False, server_default='0'),
            sa.Column('fat', sa.Numeric(10, 2), nullable=False, server_default='0'),
            sa.Column('fiber', sa.Numeric(10, 2), nullable=False, server_default='0'),
            sa.Column('sugar', sa.Numeric(10, 2), nullable=False, server_default='0'),
            sa.Column('sodium', sa.Numeric(10, 2), nullable=False, server_default='0'),
            sa.Column('ayurvedic_tag', sa.String(length=50), nullable=True),
            sa.Column('ayurvedic_properties', sa.JSON(), nullable=True),
            sa.Column('image_data', sa.JSON(), nullable=True),
            sa.Column('voice_data', sa.JSON(), nullable=True),
            sa.Column('mood', sa.String(length=20), nullable=True),
            sa.Column('energy_level', sa.Integer(), nullable=True, server_default='5'),
            sa.Column('digestion', sa.String(length=20), nullable=True),
            sa.Column('notes', sa.String(length=1000), nullable=True),
            sa.Column('servings_planned', sa.Numeric(8, 2), nullable=False, server_default='1'),
            sa.Column('servings_consumed', sa.Numeric(8, 2), nullable=False, server_default='1'),
            sa.Column('servings_remaining', sa.Numeric(8, 2), nullable=False, server_default='0'),
            sa.Column('reviewed_by', sa.Integer(), sa.ForeignKey('users.id'), nullable=True),
            sa.Column('review_date', sa.DateTime(), nullable=True),
            sa.Column('review_feedback', sa.Text(), nullable=True),
            sa.Column('review_recommendations', sa.JSON(), nullable=True),
            sa.Column('review_rating', sa.Integer(), nullable=True),
            sa.Column('review_status', sa.String(length=30), nullable=False, server_default='pending'),
            sa.Column('tags', sa.JSON(), nullable=True),
            sa.Column('is_favorite', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('meal_date', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.Column('location', sa.String(length=100), nullable=True),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )
        op.create_index('ix_meals_meal_date', 'meals', ['meal_date'])
        op.create_index('ix_meals_user_meal_date', 'meals', ['user_id', 'meal_date'])
        op.create_index('ix_meals_user_meal_type', 'meals', ['user_id', 'meal_type'])
        op.create_index('ix_meals_review_status', 'meals', ['review_status'])


def downgrade():
    op.drop_table('meals')
    op.drop_table('users')
    op.drop_table('roles')
