# /attenote/services/delete_helpers/gateways.py

"""
The narrow interfaces through which the delete coordinator talks to the
persistence layer. The SQL implementations live in
`services/database_helpers/cascade_delete_repository_sql.py`; tests supply
in-memory fakes.

Every gateway owns a `run_in_transaction(block)` primitive: whatever the
block deletes is committed together, or not at all if it raises.
"""

from typing import Callable, List, Optional, Protocol, TypeVar

T = TypeVar("T")


class ClassCascadeDeleteGateway(Protocol):
    def run_in_transaction(self, block: Callable[[], T]) -> T: ...
    def get_note_ids_for_class(self, class_id: int) -> List[int]: ...
    def get_media_paths_for_note_ids(self, note_ids: List[int]) -> List[str]: ...
    def count_media_references(self, file_path: str) -> int: ...
    def delete_attendance_records_for_class(self, class_id: int) -> int: ...
    def delete_attendance_sessions_for_class(self, class_id: int) -> int: ...
    def delete_schedules_for_class(self, class_id: int) -> int: ...
    def delete_enrollments_for_class(self, class_id: int) -> int: ...
    def delete_note_media_for_note_ids(self, note_ids: List[int]) -> int: ...
    def delete_notes_for_class(self, class_id: int) -> int: ...
    def delete_class(self, class_id: int) -> int: ...


class StudentCascadeDeleteGateway(Protocol):
    def run_in_transaction(self, block: Callable[[], T]) -> T: ...
    def delete_attendance_records_for_student(self, student_id: int) -> int: ...
    def delete_enrollments_for_student(self, student_id: int) -> int: ...
    def delete_student(self, student_id: int) -> int: ...


class PermanentNoteDeleteGateway(Protocol):
    def run_in_transaction(self, block: Callable[[], T]) -> T: ...
    def get_note_media_paths(self, note_id: int) -> List[str]: ...
    def count_media_references(self, file_path: str) -> int: ...
    def delete_all_note_media(self, note_id: int) -> int: ...
    def delete_note(self, note_id: int) -> int: ...


class PermanentMediaDeleteGateway(Protocol):
    def run_in_transaction(self, block: Callable[[], T]) -> T: ...
    def get_media_path(self, media_id: int) -> Optional[str]: ...
    def count_media_references(self, file_path: str) -> int: ...
    def delete_media(self, media_id: int) -> int: ...
