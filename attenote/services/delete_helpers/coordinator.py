# /attenote/services/delete_helpers/coordinator.py

"""
Permanent delete orchestration for classes, students, notes and note media.

Every operation follows the same three phases:

1. Delete all dependent rows inside one gateway transaction, snapshotting the
   media paths that might become unreferenced.
2. Once the transaction has committed, re-count references for each
   candidate path. Only paths with no remaining NoteMedia row move on.
3. Hand the confirmed orphans to the media cleaner, one path at a time.

Files are never touched unless phase 1 committed, and the transaction never
waits on file I/O. If phase 1 raises, the exception propagates and no
cleanup is attempted. Cleanup failures are reported per path and never undo
the committed rows; the orphan sweep picks up whatever is left behind.
"""

import logging
from typing import Callable, Collection, List, Set

from ...models.delete_model import (
    ClassCascadeDeleteResult,
    MediaCleanupResult,
    MediaCleanupStatus,
    PermanentMediaDeleteResult,
    PermanentNoteDeleteResult,
    StudentCascadeDeleteResult,
)
from ..media_cleaner import MediaFileCleaner
from .gateways import (
    ClassCascadeDeleteGateway,
    PermanentMediaDeleteGateway,
    PermanentNoteDeleteGateway,
    StudentCascadeDeleteGateway,
)

logger = logging.getLogger(__name__)


def perform_class_cascade_delete(
    class_id: int,
    gateway: ClassCascadeDeleteGateway,
    cleaner: MediaFileCleaner,
) -> ClassCascadeDeleteResult:
    """
    Deletes a class together with its attendance records, sessions,
    schedules, enrollments, notes and note media rows, then reclaims the
    media files no other row still references.
    """

    def delete_rows():
        note_ids = gateway.get_note_ids_for_class(class_id)
        candidate_paths = _unique(gateway.get_media_paths_for_note_ids(note_ids)) if note_ids else []

        # Order matters for the foreign keys: records before sessions,
        # sessions before schedules, media before notes, the class last.
        gateway.delete_attendance_records_for_class(class_id)
        gateway.delete_attendance_sessions_for_class(class_id)
        gateway.delete_schedules_for_class(class_id)
        gateway.delete_enrollments_for_class(class_id)
        if note_ids:
            gateway.delete_note_media_for_note_ids(note_ids)
        gateway.delete_notes_for_class(class_id)

        return gateway.delete_class(class_id), candidate_paths

    deleted_rows, candidate_paths = gateway.run_in_transaction(delete_rows)

    unreferenced_paths = _filter_unreferenced_paths(candidate_paths, gateway.count_media_references)
    return ClassCascadeDeleteResult(
        class_deleted=deleted_rows > 0,
        media_cleanup_results=cleanup_media_files(unreferenced_paths, cleaner),
    )


def perform_student_cascade_delete(
    student_id: int,
    gateway: StudentCascadeDeleteGateway,
) -> StudentCascadeDeleteResult:
    """Deletes a student and its attendance records. Sessions are left alone."""

    def delete_rows():
        gateway.delete_attendance_records_for_student(student_id)
        gateway.delete_enrollments_for_student(student_id)
        return gateway.delete_student(student_id)

    deleted_rows = gateway.run_in_transaction(delete_rows)
    return StudentCascadeDeleteResult(student_deleted=deleted_rows > 0)


def perform_permanent_note_delete(
    note_id: int,
    gateway: PermanentNoteDeleteGateway,
    cleaner: MediaFileCleaner,
) -> PermanentNoteDeleteResult:

    def delete_rows():
        candidate_paths = _unique(gateway.get_note_media_paths(note_id))
        gateway.delete_all_note_media(note_id)
        return gateway.delete_note(note_id), candidate_paths

    deleted_rows, candidate_paths = gateway.run_in_transaction(delete_rows)

    unreferenced_paths = _filter_unreferenced_paths(candidate_paths, gateway.count_media_references)
    return PermanentNoteDeleteResult(
        note_deleted=deleted_rows > 0,
        media_cleanup_results=cleanup_media_files(unreferenced_paths, cleaner),
    )


def perform_permanent_media_delete(
    media_id: int,
    gateway: PermanentMediaDeleteGateway,
    cleaner: MediaFileCleaner,
) -> PermanentMediaDeleteResult:
    """
    Deletes a single NoteMedia row. Deleting a row that no longer exists is a
    no-op that reports `media_deleted=False` with no cleanup results, so
    retries are safe.
    """

    def delete_row():
        media_path = gateway.get_media_path(media_id)
        if media_path is None:
            return 0, None
        return gateway.delete_media(media_id), media_path

    deleted_rows, media_path = gateway.run_in_transaction(delete_row)

    unreferenced_paths: List[str] = []
    if media_path is not None and gateway.count_media_references(media_path) <= 0:
        unreferenced_paths.append(media_path)

    return PermanentMediaDeleteResult(
        media_deleted=deleted_rows > 0,
        media_cleanup_results=cleanup_media_files(unreferenced_paths, cleaner),
    )


def cleanup_media_files(file_paths: Collection[str], cleaner: MediaFileCleaner) -> List[MediaCleanupResult]:
    """
    Runs the cleaner over each path once. Paths are trimmed, blanks dropped
    and duplicates collapsed while keeping the first-seen order.
    """
    normalized_paths = _unique(path.strip() for path in file_paths if path.strip())
    return [cleaner.delete(path) for path in normalized_paths]


def log_cleanup_warnings(operation: str, subject: str, results: Collection[MediaCleanupResult]) -> None:
    for failure in results:
        if failure.status == MediaCleanupStatus.FAILED:
            logger.warning(
                "Media cleanup warning during %s (%s, path=%s): %s",
                operation, subject, failure.file_path, failure.error_message,
            )


def _filter_unreferenced_paths(media_paths: Collection[str], count_references: Callable[[str], int]) -> List[str]:
    # Must run after the transaction committed, against the post-delete state.
    return [path for path in media_paths if count_references(path) <= 0]


def _unique(paths) -> List[str]:
    seen: Set[str] = set()
    ordered: List[str] = []
    for path in paths:
        if path not in seen:
            seen.add(path)
            ordered.append(path)
    return ordered
