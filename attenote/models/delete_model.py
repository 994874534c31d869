# /attenote/models/delete_model.py

"""
Data contracts for the outcome of permanent delete operations and of the
orphan media sweep. All fields use snake_case.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class MediaCleanupStatus(str, Enum):
    DELETED = "DELETED"
    MISSING = "MISSING"
    FAILED = "FAILED"


class MediaCleanupResult(BaseModel):
    """The outcome of one attempted media file deletion."""
    file_path: str
    status: MediaCleanupStatus
    error_message: Optional[str] = None


class ClassCascadeDeleteResult(BaseModel):
    class_deleted: bool
    media_cleanup_results: List[MediaCleanupResult] = Field(default_factory=list)


class StudentCascadeDeleteResult(BaseModel):
    student_deleted: bool


class PermanentNoteDeleteResult(BaseModel):
    note_deleted: bool
    media_cleanup_results: List[MediaCleanupResult] = Field(default_factory=list)


class PermanentMediaDeleteResult(BaseModel):
    media_deleted: bool
    media_cleanup_results: List[MediaCleanupResult] = Field(default_factory=list)


class OrphanSweepReport(BaseModel):
    """
    Summary of a single orphan sweep pass. Paths are absolute.

    `skipped_files` lists candidates that became referenced between the
    initial scan and the deletion attempt.
    """
    scanned_files: int = 0
    deleted_files: List[str] = Field(default_factory=list)
    skipped_files: List[str] = Field(default_factory=list)
    failed_files: List[str] = Field(default_factory=list)
