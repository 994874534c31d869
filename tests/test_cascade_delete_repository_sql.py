# /tests/test_cascade_delete_repository_sql.py

"""
End-to-end delete tests against a real SQLite database (foreign keys on)
and real files in a temporary media directory.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from attenote.db.models.attendance_models import AttendanceRecord, AttendanceSession, Schedule
from attenote.db.models.class_student_models import Class, ClassStudentLink, Student
from attenote.db.models.note_models import Note, NoteMedia
from attenote.models.delete_model import MediaCleanupStatus
from attenote.services.database_helpers.cascade_delete_repository_sql import (
    ClassCascadeDeleteGatewaySQL,
    PermanentMediaDeleteGatewaySQL,
    PermanentNoteDeleteGatewaySQL,
    StudentCascadeDeleteGatewaySQL,
)
from attenote.services.database_helpers.media_reference_repository_sql import MediaReferenceRepositorySQL
from attenote.services.delete_helpers import coordinator
from attenote.services.media_cleaner import LocalMediaFileCleaner


@pytest.fixture
def two_classes(seed, make_media_file):
    """
    Class 1 and class 2 each have a schedule, a session, a note and a
    private media file. Both notes also cite one shared file. Student 10 is
    enrolled in both and has a record in each session.
    """
    seed.add_class(1)
    seed.add_class(2)
    seed.add_student(10)
    seed.add_student(11)
    seed.enroll(1, 10)
    seed.enroll(2, 10)
    seed.enroll(1, 11)

    seed.add_schedule(100, class_id=1)
    seed.add_schedule(200, class_id=2)
    seed.add_session(1000, class_id=1, schedule_id=100)
    seed.add_session(2000, class_id=2, schedule_id=200)
    seed.add_record(1, session_id=1000, student_id=10)
    seed.add_record(2, session_id=1000, student_id=11)
    seed.add_record(3, session_id=2000, student_id=10)

    files = {
        "class1": make_media_file("class1.jpg", "one"),
        "class2": make_media_file("class2.jpg", "two"),
        "shared": make_media_file("shared.jpg", "shared"),
    }
    seed.add_note(500, class_id=1)
    seed.add_note(600, class_id=2)
    seed.add_media(1, note_id=500, file_path="class1.jpg")
    seed.add_media(2, note_id=500, file_path="shared.jpg")
    seed.add_media(3, note_id=600, file_path="class2.jpg")
    seed.add_media(4, note_id=600, file_path="shared.jpg")
    return files


def test_foreign_keys_are_enforced(db_session, seed):
    """Sanity check that the connect listener turned SQLite foreign keys on."""
    seed.add_class(1)
    seed.add_schedule(100, class_id=1)
    seed.add_session(1000, class_id=1, schedule_id=100)

    with pytest.raises(IntegrityError):
        db_session.query(Schedule).filter(Schedule.id == 100).delete(synchronize_session=False)
        db_session.commit()
    db_session.rollback()


def test_class_cascade_delete_clears_every_dependent_row(db_session, media_root, two_classes):
    result = coordinator.perform_class_cascade_delete(
        1, ClassCascadeDeleteGatewaySQL(db_session), LocalMediaFileCleaner(media_root)
    )

    assert result.class_deleted is True
    assert db_session.get(Class, 1) is None
    assert db_session.query(Schedule).filter(Schedule.class_id == 1).count() == 0
    assert db_session.query(AttendanceSession).filter(AttendanceSession.class_id == 1).count() == 0
    assert db_session.query(AttendanceRecord).filter(AttendanceRecord.session_id == 1000).count() == 0
    assert db_session.query(ClassStudentLink).filter(ClassStudentLink.class_id == 1).count() == 0
    assert db_session.query(Note).filter(Note.class_id == 1).count() == 0
    assert db_session.query(NoteMedia).filter(NoteMedia.note_id == 500).count() == 0

    # Only the class's private file goes; the shared one is still cited by class 2.
    assert not two_classes["class1"].exists()
    assert two_classes["shared"].exists()
    assert two_classes["class2"].exists()
    assert [(r.file_path, r.status) for r in result.media_cleanup_results] == [
        ("class1.jpg", MediaCleanupStatus.DELETED)
    ]

    # The other class and its graph are untouched.
    assert db_session.get(Class, 2) is not None
    assert db_session.query(AttendanceRecord).filter(AttendanceRecord.session_id == 2000).count() == 1
    assert db_session.query(NoteMedia).filter(NoteMedia.note_id == 600).count() == 2
    assert db_session.get(Student, 10) is not None
    print("\n✅ SUCCESS: class cascade delete removed exactly one class graph.")


def test_deleting_both_classes_eventually_reclaims_shared_file(db_session, media_root, two_classes):
    cleaner = LocalMediaFileCleaner(media_root)
    coordinator.perform_class_cascade_delete(1, ClassCascadeDeleteGatewaySQL(db_session), cleaner)
    result = coordinator.perform_class_cascade_delete(2, ClassCascadeDeleteGatewaySQL(db_session), cleaner)

    assert result.class_deleted is True
    assert not two_classes["shared"].exists()
    assert not two_classes["class2"].exists()
    assert MediaReferenceRepositorySQL(db_session).get_all_file_paths() == []


def test_student_cascade_delete_keeps_sessions_and_other_students(db_session, two_classes):
    result = coordinator.perform_student_cascade_delete(10, StudentCascadeDeleteGatewaySQL(db_session))

    assert result.student_deleted is True
    assert db_session.get(Student, 10) is None
    assert db_session.query(AttendanceRecord).filter(AttendanceRecord.student_id == 10).count() == 0
    assert db_session.query(ClassStudentLink).filter(ClassStudentLink.student_id == 10).count() == 0

    assert db_session.query(AttendanceSession).count() == 2
    assert db_session.query(AttendanceRecord).filter(AttendanceRecord.student_id == 11).count() == 1
    assert db_session.get(Student, 11) is not None


def test_student_cascade_delete_of_missing_student(db_session):
    result = coordinator.perform_student_cascade_delete(404, StudentCascadeDeleteGatewaySQL(db_session))
    assert result.student_deleted is False


def test_permanent_note_delete(db_session, media_root, two_classes):
    result = coordinator.perform_permanent_note_delete(
        600, PermanentNoteDeleteGatewaySQL(db_session), LocalMediaFileCleaner(media_root)
    )

    assert result.note_deleted is True
    assert db_session.get(Note, 600) is None
    assert db_session.query(NoteMedia).filter(NoteMedia.note_id == 600).count() == 0
    assert not two_classes["class2"].exists()
    assert two_classes["shared"].exists()
    assert db_session.get(Class, 2) is not None


def test_permanent_media_delete_is_idempotent(db_session, media_root, two_classes):
    gateway = PermanentMediaDeleteGatewaySQL(db_session)
    cleaner = LocalMediaFileCleaner(media_root)

    first = coordinator.perform_permanent_media_delete(1, gateway, cleaner)
    second = coordinator.perform_permanent_media_delete(1, gateway, cleaner)

    assert first.media_deleted is True
    assert [r.status for r in first.media_cleanup_results] == [MediaCleanupStatus.DELETED]
    assert not two_classes["class1"].exists()

    assert second.media_deleted is False
    assert second.media_cleanup_results == []
    assert db_session.query(NoteMedia).filter(NoteMedia.note_id == 500).count() == 1


def test_permanent_media_delete_keeps_shared_file(db_session, media_root, two_classes):
    result = coordinator.perform_permanent_media_delete(
        2, PermanentMediaDeleteGatewaySQL(db_session), LocalMediaFileCleaner(media_root)
    )

    assert result.media_deleted is True
    assert result.media_cleanup_results == []
    assert two_classes["shared"].exists()


def test_failed_transaction_rolls_back_rows_and_keeps_files(db_session, media_root, two_classes, mocker):
    gateway = ClassCascadeDeleteGatewaySQL(db_session)
    mocker.patch.object(gateway, "delete_class", side_effect=RuntimeError("disk I/O error"))
    cleaner = mocker.Mock(wraps=LocalMediaFileCleaner(media_root))

    with pytest.raises(RuntimeError, match="disk I/O error"):
        coordinator.perform_class_cascade_delete(1, gateway, cleaner)

    assert db_session.get(Class, 1) is not None
    assert db_session.query(AttendanceRecord).filter(AttendanceRecord.session_id == 1000).count() == 2
    assert db_session.query(Schedule).filter(Schedule.class_id == 1).count() == 1
    assert db_session.query(NoteMedia).filter(NoteMedia.note_id == 500).count() == 2
    assert two_classes["class1"].exists()
    cleaner.delete.assert_not_called()


def test_count_references_matches_exact_paths_only(db_session, seed):
    seed.add_note(1)
    seed.add_media(1, note_id=1, file_path="a/b.jpg")
    seed.add_media(2, note_id=1, file_path="a/b.jpg")
    seed.add_media(3, note_id=1, file_path="a/b.jpg.bak")

    references = MediaReferenceRepositorySQL(db_session)

    assert references.count_references("a/b.jpg") == 2
    assert references.count_references("b.jpg") == 0
    assert sorted(references.get_all_file_paths()) == ["a/b.jpg", "a/b.jpg.bak"]
