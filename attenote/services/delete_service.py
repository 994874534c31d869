# /attenote/services/delete_service.py

"""
This service module is the business logic facade for every permanent delete
in the application, and for the orphan media sweep.

It wires the SQL gateways and the media cleaner into the delete coordinator
and is the repository boundary of the delete feature: coordinator
exceptions (a failed transaction, a failed reference count) are logged and
converted into a `RepositoryError`, while a completed call always returns a
`RepositorySuccess`, even when some media files could not be removed.
Callers should treat a success whose `*_deleted` flag is set as a completed
delete regardless of the individual cleanup results.
"""

import logging
from pathlib import Path
from typing import Union

from sqlalchemy.orm import Session

from ..models.delete_model import (
    ClassCascadeDeleteResult,
    OrphanSweepReport,
    PermanentMediaDeleteResult,
    PermanentNoteDeleteResult,
    StudentCascadeDeleteResult,
)
from ..models.repository_result import RepositoryError, RepositorySuccess
from .database_helpers.cascade_delete_repository_sql import (
    ClassCascadeDeleteGatewaySQL,
    PermanentMediaDeleteGatewaySQL,
    PermanentNoteDeleteGatewaySQL,
    StudentCascadeDeleteGatewaySQL,
)
from .database_helpers.media_reference_repository_sql import MediaReferenceRepositorySQL
from .delete_helpers import coordinator, orphan_sweep
from .media_cleaner import NOTE_MEDIA_DIR, MediaFileCleaner

logger = logging.getLogger(__name__)


def delete_class_permanently(
    db: Session,
    class_id: int,
    cleaner: MediaFileCleaner,
) -> Union[RepositorySuccess[ClassCascadeDeleteResult], RepositoryError]:
    try:
        result = coordinator.perform_class_cascade_delete(
            class_id=class_id,
            gateway=ClassCascadeDeleteGatewaySQL(db),
            cleaner=cleaner,
        )
    except Exception as e:
        logger.exception("Class cascade delete failed for classId=%s", class_id)
        return RepositoryError(message=f"Failed to delete class: {e}")

    coordinator.log_cleanup_warnings("class delete", f"classId={class_id}", result.media_cleanup_results)
    logger.info(
        "Class delete classId=%s deleted=%s cleaned_files=%d",
        class_id, result.class_deleted, len(result.media_cleanup_results),
    )
    return RepositorySuccess(data=result)


def delete_student_permanently(
    db: Session,
    student_id: int,
) -> Union[RepositorySuccess[StudentCascadeDeleteResult], RepositoryError]:
    try:
        result = coordinator.perform_student_cascade_delete(
            student_id=student_id,
            gateway=StudentCascadeDeleteGatewaySQL(db),
        )
    except Exception as e:
        logger.exception("Student cascade delete failed for studentId=%s", student_id)
        return RepositoryError(message=f"Failed to delete student: {e}")

    logger.info("Student delete studentId=%s deleted=%s", student_id, result.student_deleted)
    return RepositorySuccess(data=result)


def delete_note_permanently(
    db: Session,
    note_id: int,
    cleaner: MediaFileCleaner,
) -> Union[RepositorySuccess[PermanentNoteDeleteResult], RepositoryError]:
    try:
        result = coordinator.perform_permanent_note_delete(
            note_id=note_id,
            gateway=PermanentNoteDeleteGatewaySQL(db),
            cleaner=cleaner,
        )
    except Exception as e:
        logger.exception("Permanent note delete failed for noteId=%s", note_id)
        return RepositoryError(message=f"Failed to delete note: {e}")

    coordinator.log_cleanup_warnings("note delete", f"noteId={note_id}", result.media_cleanup_results)
    return RepositorySuccess(data=result)


def delete_note_media_permanently(
    db: Session,
    media_id: int,
    cleaner: MediaFileCleaner,
) -> Union[RepositorySuccess[PermanentMediaDeleteResult], RepositoryError]:
    try:
        result = coordinator.perform_permanent_media_delete(
            media_id=media_id,
            gateway=PermanentMediaDeleteGatewaySQL(db),
            cleaner=cleaner,
        )
    except Exception as e:
        logger.exception("Permanent media delete failed for mediaId=%s", media_id)
        return RepositoryError(message=f"Failed to delete media: {e}")

    coordinator.log_cleanup_warnings("media delete", f"mediaId={media_id}", result.media_cleanup_results)
    return RepositorySuccess(data=result)


def sweep_orphaned_media(
    db: Session,
    media_root: Union[str, Path] = NOTE_MEDIA_DIR,
) -> Union[RepositorySuccess[OrphanSweepReport], RepositoryError]:
    """
    Entry point for the external scheduler. Runs one orphan sweep pass over
    `media_root` against the live NoteMedia rows.
    """
    try:
        report = orphan_sweep.sweep_orphaned_media(MediaReferenceRepositorySQL(db), media_root)
    except Exception as e:
        logger.exception("Orphan media sweep failed")
        return RepositoryError(message=f"Failed to sweep orphaned media: {e}")
    return RepositorySuccess(data=report)
