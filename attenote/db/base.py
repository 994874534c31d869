# /attenote/db/base.py

# This file acts as a central registry for all our SQLAlchemy models.
# By importing them all here, we ensure that the Base class knows about them
# when Alembic runs its auto-generation scan and when `create_all` is called.

# Import the Base class that all models inherit from.
from .base_class import Base

# Import all of our model classes from their respective files.
from .models.class_student_models import Class, Student, ClassStudentLink
from .models.attendance_models import Schedule, AttendanceSession, AttendanceRecord
from .models.note_models import Note, NoteMedia
