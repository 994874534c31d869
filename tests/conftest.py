# /tests/conftest.py

import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Importing the database module registers the SQLite foreign key listener.
from attenote.db import database  # noqa: F401
from attenote.db.base import Base
from attenote.db.models.attendance_models import AttendanceRecord, AttendanceSession, Schedule
from attenote.db.models.class_student_models import Class, ClassStudentLink, Student
from attenote.db.models.note_models import Note, NoteMedia


@pytest.fixture
def engine(tmp_path):
    """A fresh file-backed SQLite database per test, with foreign keys enforced."""
    db_engine = create_engine(
        f"sqlite:///{tmp_path / 'attenote_test.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=db_engine)
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def media_root(tmp_path):
    """The note media directory, created empty for each test."""
    root = tmp_path / "note_media"
    root.mkdir()
    return root


@pytest.fixture
def make_media_file(media_root):
    """Writes a small file under the media root and returns its absolute Path."""
    def _make(name: str, content: str = "media"):
        path = media_root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path
    return _make


@pytest.fixture
def seed(db_session):
    """
    Helpers that insert rows for one test. Each helper commits so
    the rows are visible to every later session.
    """
    class Seeder:
        def add_class(self, class_id: int, name: str = None) -> Class:
            row = Class(id=class_id, name=name or f"Class {class_id}", subject="Physics", is_open=True)
            return self._save(row)

        def add_student(self, student_id: int) -> Student:
            row = Student(id=student_id, name=f"Student {student_id}", registration_number=f"REG-{student_id}")
            return self._save(row)

        def enroll(self, class_id: int, student_id: int) -> ClassStudentLink:
            return self._save(ClassStudentLink(class_id=class_id, student_id=student_id))

        def add_schedule(self, schedule_id: int, class_id: int) -> Schedule:
            row = Schedule(
                id=schedule_id,
                class_id=class_id,
                day_of_week=1,
                start_time=datetime.time(9, 0),
                end_time=datetime.time(10, 0),
                duration_minutes=60,
            )
            return self._save(row)

        def add_session(self, session_id: int, class_id: int, schedule_id: int, day: int = 1) -> AttendanceSession:
            row = AttendanceSession(
                id=session_id,
                class_id=class_id,
                schedule_id=schedule_id,
                date=datetime.date(2026, 9, day),
            )
            return self._save(row)

        def add_record(self, record_id: int, session_id: int, student_id: int) -> AttendanceRecord:
            return self._save(AttendanceRecord(id=record_id, session_id=session_id, student_id=student_id))

        def add_note(self, note_id: int, class_id=None) -> Note:
            row = Note(id=note_id, class_id=class_id, title=f"Note {note_id}", content="", date=datetime.date(2026, 9, 1))
            return self._save(row)

        def add_media(self, media_id: int, note_id: int, file_path: str) -> NoteMedia:
            return self._save(NoteMedia(id=media_id, note_id=note_id, file_path=file_path, mime_type="image/jpeg"))

        def _save(self, row):
            db_session.add(row)
            db_session.commit()
            return row

    return Seeder()
