# /attenote/db/models/attendance_models.py

"""
This module defines the SQLAlchemy ORM models for the scheduling and
attendance side of a class: `Schedule`, `AttendanceSession` and
`AttendanceRecord`.
"""

from sqlalchemy import Boolean, Column, Date, ForeignKey, Integer, String, Time, UniqueConstraint
from sqlalchemy.orm import relationship

from ..base_class import Base


class Schedule(Base):
    """A weekly time slot of a class."""
    id = Column(Integer, primary_key=True, index=True)
    class_id = Column(Integer, ForeignKey("classes.id", ondelete="CASCADE"), nullable=False, index=True)
    day_of_week = Column(Integer, nullable=False)  # 1 = Monday ... 7 = Sunday
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    duration_minutes = Column(Integer, nullable=False, default=0)

    class_ = relationship("Class", viewonly=True)


class AttendanceSession(Base):
    """
    One taught (or skipped) occurrence of a scheduled slot.

    The schedule foreign key is RESTRICT: a schedule cannot be removed while
    a session still points at it, so sessions must always be deleted first.
    """
    __tablename__ = "attendance_sessions"
    __table_args__ = (UniqueConstraint("class_id", "schedule_id", "date"),)

    id = Column(Integer, primary_key=True, index=True)
    class_id = Column(Integer, ForeignKey("classes.id", ondelete="CASCADE"), nullable=False, index=True)
    schedule_id = Column(Integer, ForeignKey("schedules.id", ondelete="RESTRICT"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    is_class_taken = Column(Boolean, nullable=False, default=True)
    lesson_notes = Column(String, nullable=True)

    class_ = relationship("Class", viewonly=True)
    records = relationship("AttendanceRecord", viewonly=True)


class AttendanceRecord(Base):
    """The attendance status of a single student within a single session."""
    __tablename__ = "attendance_records"
    __table_args__ = (UniqueConstraint("session_id", "student_id"),)

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(Integer, ForeignKey("attendance_sessions.id", ondelete="CASCADE"), nullable=False, index=True)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(String, nullable=False, default="PRESENT")

    session = relationship("AttendanceSession", viewonly=True)
