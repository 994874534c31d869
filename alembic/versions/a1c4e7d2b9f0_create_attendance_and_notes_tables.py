"""Create class, attendance and note tables

Revision ID: a1c4e7d2b9f0
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1c4e7d2b9f0'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the roster, attendance and note tables with their foreign keys."""
    op.create_table(
        'classes',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('subject', sa.String(), nullable=True),
        sa.Column('is_open', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.Date(), server_default=sa.func.current_date()),
    )
    op.create_index('ix_classes_id', 'classes', ['id'])
    op.create_index('ix_classes_name', 'classes', ['name'])

    op.create_table(
        'students',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('registration_number', sa.String(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
    )
    op.create_index('ix_students_id', 'students', ['id'])
    op.create_index('ix_students_name', 'students', ['name'])
    op.create_index('ix_students_registration_number', 'students', ['registration_number'], unique=True)

    op.create_table(
        'class_student_links',
        sa.Column('class_id', sa.Integer(), sa.ForeignKey('classes.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('students.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('is_active_in_class', sa.Boolean(), nullable=False),
        sa.Column('added_at', sa.Date(), server_default=sa.func.current_date()),
    )
    op.create_index('ix_class_student_links_class_id', 'class_student_links', ['class_id'])
    op.create_index('ix_class_student_links_student_id', 'class_student_links', ['student_id'])

    op.create_table(
        'schedules',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('class_id', sa.Integer(), sa.ForeignKey('classes.id', ondelete='CASCADE'), nullable=False),
        sa.Column('day_of_week', sa.Integer(), nullable=False),
        sa.Column('start_time', sa.Time(), nullable=False),
        sa.Column('end_time', sa.Time(), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=False),
    )
    op.create_index('ix_schedules_id', 'schedules', ['id'])
    op.create_index('ix_schedules_class_id', 'schedules', ['class_id'])

    # Sessions RESTRICT their schedule: schedules can only go once their sessions are gone.
    op.create_table(
        'attendance_sessions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('class_id', sa.Integer(), sa.ForeignKey('classes.id', ondelete='CASCADE'), nullable=False),
        sa.Column('schedule_id', sa.Integer(), sa.ForeignKey('schedules.id', ondelete='RESTRICT'), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('is_class_taken', sa.Boolean(), nullable=False),
        sa.Column('lesson_notes', sa.String(), nullable=True),
        sa.UniqueConstraint('class_id', 'schedule_id', 'date'),
    )
    op.create_index('ix_attendance_sessions_id', 'attendance_sessions', ['id'])
    op.create_index('ix_attendance_sessions_class_id', 'attendance_sessions', ['class_id'])
    op.create_index('ix_attendance_sessions_schedule_id', 'attendance_sessions', ['schedule_id'])
    op.create_index('ix_attendance_sessions_date', 'attendance_sessions', ['date'])

    op.create_table(
        'attendance_records',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('session_id', sa.Integer(), sa.ForeignKey('attendance_sessions.id', ondelete='CASCADE'), nullable=False),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('students.id', ondelete='CASCADE'), nullable=False),
        sa.Column('status', sa.String(), nullable=False),
        sa.UniqueConstraint('session_id', 'student_id'),
    )
    op.create_index('ix_attendance_records_id', 'attendance_records', ['id'])
    op.create_index('ix_attendance_records_session_id', 'attendance_records', ['session_id'])
    op.create_index('ix_attendance_records_student_id', 'attendance_records', ['student_id'])

    op.create_table(
        'notes',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('class_id', sa.Integer(), sa.ForeignKey('classes.id', ondelete='CASCADE'), nullable=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('updated_at', sa.Date(), server_default=sa.func.current_date()),
    )
    op.create_index('ix_notes_id', 'notes', ['id'])
    op.create_index('ix_notes_class_id', 'notes', ['class_id'])
    op.create_index('ix_notes_date', 'notes', ['date'])

    op.create_table(
        'note_media',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('note_id', sa.Integer(), sa.ForeignKey('notes.id', ondelete='CASCADE'), nullable=False),
        sa.Column('file_path', sa.String(), nullable=False),
        sa.Column('mime_type', sa.String(), nullable=False),
        sa.Column('added_at', sa.Date(), server_default=sa.func.current_date()),
    )
    op.create_index('ix_note_media_id', 'note_media', ['id'])
    op.create_index('ix_note_media_note_id', 'note_media', ['note_id'])
    op.create_index('ix_note_media_file_path', 'note_media', ['file_path'])


def downgrade() -> None:
    """Drop all tables, children first."""
    op.drop_table('note_media')
    op.drop_table('notes')
    op.drop_table('attendance_records')
    op.drop_table('attendance_sessions')
    op.drop_table('schedules')
    op.drop_table('class_student_links')
    op.drop_table('students')
    op.drop_table('classes')
