"""initial dojo schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _record_columns():
    return [
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('version', sa.Integer(), server_default='1', nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        *_record_columns(),
        sa.Column('username', sa.String(50), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('display_name', sa.String(100)),
        sa.Column('email', sa.String(255)),
        sa.Column('phone', sa.String(30)),
        sa.Column('role', sa.String(20), nullable=False),
        sa.Column('stripe_customer_id', sa.String(255)),
        sa.Column('stripe_subscription_id', sa.String(255)),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    op.create_table(
        'techniques',
        *_record_columns(),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('category', sa.String(50), nullable=False),
        sa.Column('belt_level', sa.String(20)),
    )
    op.create_index('ix_techniques_category', 'techniques', ['category'])
    op.create_index('ix_techniques_belt_level', 'techniques', ['belt_level'])

    op.create_table(
        'classes',
        *_record_columns(),
        sa.Column('instructor_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('level', sa.String(20), nullable=False),
        sa.Column('type', sa.String(20), nullable=False),
        sa.Column('max_capacity', sa.Integer()),
    )
    op.create_index('ix_classes_instructor_id', 'classes', ['instructor_id'])

    op.create_table(
        'class_sessions',
        *_record_columns(),
        sa.Column('class_id', sa.Integer(), sa.ForeignKey('classes.id', ondelete='CASCADE'), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('start_time', sa.String(5), nullable=False),
        sa.Column('end_time', sa.String(5), nullable=False),
        sa.Column('notes', sa.Text()),
    )
    op.create_index('ix_class_sessions_class_id', 'class_sessions', ['class_id'])
    op.create_index('ix_class_sessions_date', 'class_sessions', ['date'])

    op.create_table(
        'attendance',
        *_record_columns(),
        sa.Column('session_id', sa.Integer(), sa.ForeignKey('class_sessions.id', ondelete='CASCADE'), nullable=False),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('notes', sa.Text()),
    )
    op.create_index('ix_attendance_session_id', 'attendance', ['session_id'])
    op.create_index('ix_attendance_student_id', 'attendance', ['student_id'])

    op.create_table(
        'student_progress',
        *_record_columns(),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('belt_rank', sa.String(20), nullable=False),
        sa.Column('stripes', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('last_promotion_date', sa.Date()),
        sa.Column('notes', sa.Text()),
    )
    op.create_index('ix_student_progress_student_id', 'student_progress', ['student_id'])

    op.create_table(
        'progress_notes',
        *_record_columns(),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('author_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='SET NULL')),
        sa.Column('technique_id', sa.Integer(), sa.ForeignKey('techniques.id', ondelete='SET NULL')),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('note_type', sa.String(20), nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
    )
    op.create_index('ix_progress_notes_member_id', 'progress_notes', ['member_id'])
    op.create_index('ix_progress_notes_author_id', 'progress_notes', ['author_id'])
    op.create_index('ix_progress_notes_date', 'progress_notes', ['date'])

    op.create_table(
        'events',
        *_record_columns(),
        sa.Column('instructor_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='SET NULL')),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('event_type', sa.String(20), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('start_time', sa.String(5), nullable=False),
        sa.Column('end_time', sa.String(5), nullable=False),
        sa.Column('location', sa.String(200), nullable=False),
        sa.Column('max_attendees', sa.Integer()),
        sa.Column('registration_required', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('external_link', sa.String(500)),
        sa.Column('cost', sa.String(50)),
    )
    op.create_index('ix_events_instructor_id', 'events', ['instructor_id'])
    op.create_index('ix_events_date', 'events', ['date'])

    for table in ('users', 'techniques', 'classes', 'class_sessions', 'attendance',
                  'student_progress', 'progress_notes', 'events'):
        op.create_index(f'ix_{table}_created_at', table, ['created_at'])


def downgrade() -> None:
    for table in ('events', 'progress_notes', 'student_progress', 'attendance',
                  'class_sessions', 'classes', 'techniques', 'users'):
        op.drop_table(table)
