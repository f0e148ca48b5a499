"""Initial StayDesk schema

Revision ID: 001_initial
Revises: 
Create Date: 2026-10-19

Nine tables. Money as NUMERIC(10,2), enums stored as their string values,
all foreign keys weak (no cascading delete).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # === USERS ===
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('username', sa.String(100), unique=True, nullable=False, index=True),
        sa.Column('email', sa.String(255), unique=True, nullable=False, index=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('role', sa.String(32), nullable=False, server_default='staff'),
        sa.Column('first_name', sa.String(100), nullable=True),
        sa.Column('last_name', sa.String(100), nullable=True),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )

    # === USER SESSIONS ===
    op.create_table(
        'user_sessions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('token_hash', sa.String(64), unique=True, nullable=False, index=True),
        sa.Column('expires_at', sa.DateTime(), nullable=False),
        sa.Column('revoked_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )

    # === PROPERTIES ===
    op.create_table(
        'properties',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('address', sa.String(500), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('type', sa.String(50), nullable=False),
        sa.Column('bedrooms', sa.Integer(), nullable=False),
        sa.Column('bathrooms', sa.Integer(), nullable=False),
        sa.Column('max_guests', sa.Integer(), nullable=False),
        sa.Column('base_price', sa.Numeric(10, 2), nullable=False),
        sa.Column('cleaning_fee', sa.Numeric(10, 2), nullable=True, server_default='0'),
        sa.Column('owner_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=True, index=True),
        sa.Column('images', sa.JSON(), nullable=True),
        sa.Column('amenities', sa.JSON(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true(), index=True),
        sa.Column('airbnb_id', sa.String(100), nullable=True),
        sa.Column('booking_com_id', sa.String(100), nullable=True),
        sa.Column('vrbo_id', sa.String(100), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.CheckConstraint('base_price >= 0', name='ck_property_base_price_non_negative'),
    )

    # === BOOKINGS ===
    op.create_table(
        'bookings',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('property_id', sa.Integer(), sa.ForeignKey('properties.id'), nullable=True, index=True),
        sa.Column('guest_name', sa.String(255), nullable=False),
        sa.Column('guest_email', sa.String(255), nullable=False),
        sa.Column('guest_phone', sa.String(50), nullable=True),
        sa.Column('check_in_date', sa.DateTime(), nullable=False, index=True),
        sa.Column('check_out_date', sa.DateTime(), nullable=False, index=True),
        sa.Column('guests', sa.Integer(), nullable=False),
        sa.Column('total_amount', sa.Numeric(10, 2), nullable=False),
        sa.Column('status', sa.String(32), nullable=False, server_default='pending', index=True),
        sa.Column('source', sa.String(32), nullable=False, server_default='direct'),
        sa.Column('external_booking_id', sa.String(100), nullable=True),
        sa.Column('payment_status', sa.String(32), nullable=False, server_default='pending'),
        sa.Column('stripe_payment_intent_id', sa.String(255), nullable=True),
        sa.Column('special_requests', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True, index=True),
    )

    # === MESSAGES ===
    op.create_table(
        'messages',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('booking_id', sa.Integer(), sa.ForeignKey('bookings.id'), nullable=True, index=True),
        sa.Column('property_id', sa.Integer(), sa.ForeignKey('properties.id'), nullable=True, index=True),
        sa.Column('sender', sa.String(32), nullable=False),
        sa.Column('sender_name', sa.String(255), nullable=True),
        sa.Column('sender_email', sa.String(255), nullable=True),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('is_read', sa.Boolean(), nullable=False, server_default=sa.false(), index=True),
        sa.Column('source', sa.String(32), nullable=False, server_default='direct'),
        sa.Column('external_message_id', sa.String(255), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True, index=True),
    )

    # === HOUSEKEEPING TASKS ===
    op.create_table(
        'housekeeping_tasks',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('property_id', sa.Integer(), sa.ForeignKey('properties.id'), nullable=True, index=True),
        sa.Column('booking_id', sa.Integer(), sa.ForeignKey('bookings.id'), nullable=True),
        sa.Column('assigned_to', sa.Integer(), sa.ForeignKey('users.id'), nullable=True, index=True),
        sa.Column('task_type', sa.String(32), nullable=False),
        sa.Column('status', sa.String(32), nullable=False, server_default='pending', index=True),
        sa.Column('due_date', sa.DateTime(), nullable=True, index=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True, index=True),
    )

    # === PAYMENTS ===
    op.create_table(
        'payments',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('booking_id', sa.Integer(), sa.ForeignKey('bookings.id'), nullable=True, index=True),
        sa.Column('amount', sa.Numeric(10, 2), nullable=False),
        sa.Column('currency', sa.String(3), nullable=False, server_default='USD'),
        sa.Column('status', sa.String(32), nullable=False, server_default='pending', index=True),
        sa.Column('payment_method', sa.String(32), nullable=True),
        sa.Column('stripe_payment_intent_id', sa.String(255), nullable=True),
        sa.Column('processing_fee', sa.Numeric(10, 2), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True, index=True),
    )

    # === OTA INTEGRATIONS ===
    op.create_table(
        'ota_integrations',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('platform', sa.String(32), nullable=False),
        sa.Column('property_id', sa.Integer(), sa.ForeignKey('properties.id'), nullable=True, index=True),
        sa.Column('external_property_id', sa.String(255), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('last_sync_at', sa.DateTime(), nullable=True),
        sa.Column('sync_settings', sa.JSON(), nullable=True),
        sa.Column('credentials', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )

    # === ANALYTICS ===
    op.create_table(
        'analytics',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('property_id', sa.Integer(), sa.ForeignKey('properties.id'), nullable=True, index=True),
        sa.Column('date', sa.DateTime(), nullable=False, index=True),
        sa.Column('occupancy_rate', sa.Numeric(5, 2), nullable=True),
        sa.Column('revenue', sa.Numeric(10, 2), nullable=True),
        sa.Column('bookings_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('average_stay', sa.Numeric(5, 2), nullable=True),
        sa.Column('source', sa.String(32), nullable=True),
    )


def downgrade() -> None:
    op.drop_table('analytics')
    op.drop_table('ota_integrations')
    op.drop_table('payments')
    op.drop_table('housekeeping_tasks')
    op.drop_table('messages')
    op.drop_table('bookings')
    op.drop_table('properties')
    op.drop_table('user_sessions')
    op.drop_table('users')
