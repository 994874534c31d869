# /attenote/db/models/class_student_models.py

"""
This module defines the SQLAlchemy ORM models for the `Class` and `Student`
entities, plus the enrollment link between them.

A Class is the root of most of the instructor's data: its schedules,
attendance sessions and notes all hang off it and are removed with it. A
Student only owns its attendance records and enrollment links; sessions
belong to classes, never to students.
"""

from sqlalchemy import Boolean, Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


class Class(Base):
    """
    SQLAlchemy model representing a class or course taught by the instructor.
    """
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)
    subject = Column(String, nullable=True)
    is_open = Column(Boolean, nullable=False, default=True)
    created_at = Column(Date, server_default=func.current_date())

    # Deletions are performed explicitly by the cascade delete gateways, so
    # these relationships are read-only views of the graph.
    schedules = relationship("Schedule", viewonly=True)
    sessions = relationship("AttendanceSession", viewonly=True)
    notes = relationship("Note", viewonly=True)


class Student(Base):
    """
    SQLAlchemy model representing a single student. A student may be enrolled
    in several classes through `ClassStudentLink`.
    """
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)
    registration_number = Column(String, unique=True, index=True, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)


class ClassStudentLink(Base):
    __tablename__ = "class_student_links"

    class_id = Column(Integer, ForeignKey("classes.id", ondelete="CASCADE"), primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), primary_key=True, index=True)
    is_active_in_class = Column(Boolean, nullable=False, default=True)
    added_at = Column(Date, server_default=func.current_date())
