# /attenote/services/database_helpers/cascade_delete_repository_sql.py

"""
SQLAlchemy implementations of the cascade delete gateways.

Each gateway exposes the row-level deletions the delete coordinator needs
for one entity type, plus `run_in_transaction`, which commits everything the
block did as one unit or rolls all of it back. The individual delete methods
never commit on their own.

All bulk deletes use `synchronize_session=False`: the session is committed
(and therefore expired) right after the block, so no stale objects survive.
"""

from typing import Callable, List, Optional, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from attenote.db.models.attendance_models import AttendanceRecord, AttendanceSession, Schedule
from attenote.db.models.class_student_models import Class, ClassStudentLink, Student
from attenote.db.models.note_models import Note, NoteMedia

from .media_reference_repository_sql import MediaReferenceRepositorySQL

T = TypeVar("T")


class _TransactionalGatewaySQL:
    def __init__(self, db_session: Session):
        self.db = db_session
        self.references = MediaReferenceRepositorySQL(db_session)

    def run_in_transaction(self, block: Callable[[], T]) -> T:
        try:
            result = block()
            self.db.commit()
            return result
        except Exception:
            self.db.rollback()
            raise

    def count_media_references(self, file_path: str) -> int:
        return self.references.count_references(file_path)


class ClassCascadeDeleteGatewaySQL(_TransactionalGatewaySQL):

    def get_note_ids_for_class(self, class_id: int) -> List[int]:
        rows = self.db.query(Note.id).filter(Note.class_id == class_id).all()
        return [row.id for row in rows]

    def get_media_paths_for_note_ids(self, note_ids: List[int]) -> List[str]:
        rows = self.db.query(NoteMedia.file_path).filter(NoteMedia.note_id.in_(note_ids)).all()
        return [row.file_path for row in rows]

    def delete_attendance_records_for_class(self, class_id: int) -> int:
        class_sessions = select(AttendanceSession.id).where(AttendanceSession.class_id == class_id)
        return (
            self.db.query(AttendanceRecord)
            .filter(AttendanceRecord.session_id.in_(class_sessions))
            .delete(synchronize_session=False)
        )

    def delete_attendance_sessions_for_class(self, class_id: int) -> int:
        return (
            self.db.query(AttendanceSession)
            .filter(AttendanceSession.class_id == class_id)
            .delete(synchronize_session=False)
        )

    def delete_schedules_for_class(self, class_id: int) -> int:
        return (
            self.db.query(Schedule)
            .filter(Schedule.class_id == class_id)
            .delete(synchronize_session=False)
        )

    def delete_enrollments_for_class(self, class_id: int) -> int:
        return (
            self.db.query(ClassStudentLink)
            .filter(ClassStudentLink.class_id == class_id)
            .delete(synchronize_session=False)
        )

    def delete_note_media_for_note_ids(self, note_ids: List[int]) -> int:
        return (
            self.db.query(NoteMedia)
            .filter(NoteMedia.note_id.in_(note_ids))
            .delete(synchronize_session=False)
        )

    def delete_notes_for_class(self, class_id: int) -> int:
        return (
            self.db.query(Note)
            .filter(Note.class_id == class_id)
            .delete(synchronize_session=False)
        )

    def delete_class(self, class_id: int) -> int:
        return self.db.query(Class).filter(Class.id == class_id).delete(synchronize_session=False)


class StudentCascadeDeleteGatewaySQL(_TransactionalGatewaySQL):

    def delete_attendance_records_for_student(self, student_id: int) -> int:
        return (
            self.db.query(AttendanceRecord)
            .filter(AttendanceRecord.student_id == student_id)
            .delete(synchronize_session=False)
        )

    def delete_enrollments_for_student(self, student_id: int) -> int:
        return (
            self.db.query(ClassStudentLink)
            .filter(ClassStudentLink.student_id == student_id)
            .delete(synchronize_session=False)
        )

    def delete_student(self, student_id: int) -> int:
        return self.db.query(Student).filter(Student.id == student_id).delete(synchronize_session=False)


class PermanentNoteDeleteGatewaySQL(_TransactionalGatewaySQL):

    def get_note_media_paths(self, note_id: int) -> List[str]:
        rows = self.db.query(NoteMedia.file_path).filter(NoteMedia.note_id == note_id).all()
        return [row.file_path for row in rows]

    def delete_all_note_media(self, note_id: int) -> int:
        return (
            self.db.query(NoteMedia)
            .filter(NoteMedia.note_id == note_id)
            .delete(synchronize_session=False)
        )

    def delete_note(self, note_id: int) -> int:
        return self.db.query(Note).filter(Note.id == note_id).delete(synchronize_session=False)


class PermanentMediaDeleteGatewaySQL(_TransactionalGatewaySQL):

    def get_media_path(self, media_id: int) -> Optional[str]:
        row = self.db.query(NoteMedia.file_path).filter(NoteMedia.id == media_id).first()
        return row.file_path if row else None

    def delete_media(self, media_id: int) -> int:
        return self.db.query(NoteMedia).filter(NoteMedia.id == media_id).delete(synchronize_session=False)
